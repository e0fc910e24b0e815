"""Routes package - register all blueprints."""

from flask import Flask


def register_blueprints(app: Flask):
    """Register all blueprints with the application."""
    from .main import main_bp
    from .contact import contact_bp
    from .auth import auth_bp
    from .admin import admin_bp
    
    app.register_blueprint(main_bp, url_prefix='/api')
    app.register_blueprint(contact_bp, url_prefix='/api')
    app.register_blueprint(auth_bp, url_prefix='/api')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
