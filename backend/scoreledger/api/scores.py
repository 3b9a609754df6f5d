from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from scoreledger.services.ledger import (
    submit_fly_score as svc_submit_fly_score,
    get_best as svc_get_best,
    has_submitted as svc_has_submitted,
    is_authorized as svc_is_authorized,
)


scores = Blueprint('scores', __name__)


@scores.route('/submit', methods=['POST'])
@login_required
def submit_fly_score():
    data = request.get_json(silent=True) or {}
    handle = data.get('handle')
    proof = data.get('proof')
    if not all([handle, proof]):
        return jsonify({'error': 'Ciphertext handle and input proof are required', 'code': 'malformed_proof'}), 400

    # LedgerError subclasses are turned into responses by the app error handler
    record = svc_submit_fly_score(current_user.identity, handle, proof)
    payload = record.to_dict()
    payload['message'] = 'Score submitted'
    return jsonify(payload), 200


@scores.route('/<string:player>/best', methods=['GET'])
def get_best_score(player):
    return jsonify({'player': player, 'handle': svc_get_best(player)})


@scores.route('/<string:player>/submitted', methods=['GET'])
def has_submitted_score(player):
    return jsonify({'player': player, 'has_submitted': svc_has_submitted(player)})


@scores.route('/grants/<string:handle>', methods=['GET'])
def check_grant(handle):
    identity = request.args.get('identity')
    if not identity:
        return jsonify({'error': 'identity is required'}), 400
    return jsonify({
        'handle': handle,
        'identity': identity,
        'authorized': svc_is_authorized(handle, identity),
    })
