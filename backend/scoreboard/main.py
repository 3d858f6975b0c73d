from flask import Blueprint, jsonify
from flask_login import current_user

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the scoreboard server!'})

@main.route('/me')
def me():
    # before_request has already resolved or created the user
    return jsonify(current_user.to_dict())
