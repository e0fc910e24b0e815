import os
from dotenv import load_dotenv

load_dotenv()


def parse_accounts(raw):
    """Parse ``user:pass,user2:pass2`` into a list of (username, password)."""
    accounts = []
    for entry in (raw or '').split(','):
        entry = entry.strip()
        if not entry or ':' not in entry:
            continue
        username, password = entry.split(':', 1)
        accounts.append((username.strip(), password))
    return accounts


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    
    # Admin and staff credential tables
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'bc')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'dev-admin-password-change-in-production'
    STAFF_ACCOUNTS = parse_accounts(os.environ.get('STAFF_ACCOUNTS'))
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', 12))
    # SHA-256 passwords first so inputs over 72 bytes are accepted
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    
    # CORS for the front end
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    
    PING_MESSAGE = os.environ.get('PING_MESSAGE', 'ping')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    

class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    

class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin-pass'
    STAFF_ACCOUNTS = [('ann', 'staff-pass'), ('bob', 'staff-pass-2')]
    BCRYPT_LOG_ROUNDS = 4
    PING_MESSAGE = 'ping'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
