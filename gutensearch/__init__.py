"""
gutensearch - compare full-text search on PostgreSQL and Elasticsearch.
"""

__version__ = "0.1.0"
