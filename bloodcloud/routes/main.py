"""Service status endpoints."""

from flask import Blueprint, current_app, jsonify

main_bp = Blueprint('main', __name__)


@main_bp.route('/ping')
def ping():
    return jsonify({'message': current_app.config['PING_MESSAGE']})


@main_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})
