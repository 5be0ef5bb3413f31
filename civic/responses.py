"""
JSON response helpers

Every endpoint answers with the same envelope:
``{"success": bool, "message": str | None, "data": ...}``.
"""

from flask import jsonify


def api_response(data=None, message=None, status=200):
    return jsonify({'success': True, 'message': message, 'data': data}), status


def error_response(message, status, data=None):
    return jsonify({'success': False, 'message': message, 'data': data}), status
