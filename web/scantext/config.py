"""Flask Configuration Classes"""
import os


class Config:
    """Base configuration - shared across all environments"""
    # Secret key
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-prod'

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///scantext.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False

    # Caching
    CACHE_TYPE = 'SimpleCache'  # Override in production
    CACHE_DEFAULT_TIMEOUT = 3600

    # Candidate directory (sibling names per bundle) - the links themselves are never cached
    CANDIDATE_CACHE_TIMEOUT = 600

    # Text formats
    DEFAULT_TEXT_FORMAT = 'plain_text'
    FALLBACK_TEXT_FORMAT = 'plain_text'

    # Optional CSS class added to generated term links
    SCAN_TEXT_LINK_CLASS = None

    # Vocabulary the node tags widget picks terms from
    NODE_TAGS_VOCABULARY = 'tags'

    # Display formatter per '<entity_type>.<field>'; unlisted fields use text_default
    FIELD_FORMATTERS = {
        'taxonomy_term.description': 'scan_text_default',
        'node.body': 'text_default',
    }

    # Pagination
    ITEMS_PER_PAGE = 50

    # Debug Mode
    DEBUG = False


class DevelopmentConfig(Config):
    """Development specific configuration"""
    DEBUG = True
    SQLALCHEMY_ECHO = True  # Log all SQL queries
    TEMPLATES_AUTO_RELOAD = True
    CACHE_DEFAULT_TIMEOUT = 300  # 5 minutes default


class ProductionConfig(Config):
    """Production specific configuration - Redis cache"""
    DEBUG = False

    CACHE_TYPE = 'RedisCache'
    CACHE_REDIS_URL = os.environ.get('REDIS_URL') or 'redis://localhost:6379/0'
    CACHE_DEFAULT_TIMEOUT = 600
    CACHE_KEY_PREFIX = 'scantext:'

    # Security Headers
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    """Testing specific configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    CACHE_TYPE = 'NullCache'
    WTF_CSRF_ENABLED = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
