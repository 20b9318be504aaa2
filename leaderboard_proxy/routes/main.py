from flask import Blueprint, jsonify, current_app

bp = Blueprint('main', __name__)


@bp.route('/health')
def health_check():
    """API health check endpoint"""
    return jsonify({
        "status": "ok",
        "message": "API is running",
        "upstream": current_app.config['UPSTREAM_BASE_URL']
    })
