"""Flask application factory."""

import logging
import os
from flask import Flask
from .config import config
from .errors import InvalidOrExpiredSession, register_error_handlers
from .extensions import bcrypt, cors, login_manager


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    
    # Initialize extensions
    login_manager.init_app(app)
    bcrypt.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}})
    
    # Per-app stores and services
    from .services import init_services, get_auth_service
    init_services(app, bcrypt)
    
    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)
    
    # Bearer token loader for Flask-Login
    from .utils.request import get_session_token
    
    @login_manager.request_loader
    def load_session(request):
        return get_auth_service().sessions.get(get_session_token())
    
    @login_manager.unauthorized_handler
    def unauthorized():
        raise InvalidOrExpiredSession()
    
    register_error_handlers(app)
    
    app.logger.debug('Blood Cloud API configured (%s)', config_name)
    return app
