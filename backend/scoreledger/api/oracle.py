"""Development endpoints backed by the in-process mock oracle.

They stand in for the player's client-side encryption and for the
authorized decryption channel. The ledger core never calls them.
"""
from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required, current_user

from scoreledger.crypto import get_oracle
from scoreledger.crypto.mock import DecryptionDenied
from scoreledger.errors import OracleError
from scoreledger.services.ledger import is_authorized


oracle_api = Blueprint('oracle', __name__)


@oracle_api.route('/encrypt', methods=['POST'])
@login_required
def encrypt_input():
    data = request.get_json(silent=True) or {}
    value = data.get('value')
    try:
        handle, proof = get_oracle().encrypt_input(
            current_app.config['LEDGER_IDENTITY'], current_user.identity, value
        )
    except ValueError as exc:
        return jsonify({'error': str(exc)}), 400
    return jsonify({'handle': handle, 'proof': proof}), 201


@oracle_api.route('/decrypt', methods=['POST'])
@login_required
def decrypt_for():
    data = request.get_json(silent=True) or {}
    handle = data.get('handle')
    try:
        value = get_oracle().decrypt_for(current_user.identity, handle, is_authorized)
    except DecryptionDenied as exc:
        return jsonify({'error': str(exc), 'code': 'not_authorized'}), 403
    except OracleError as exc:
        return jsonify({'error': str(exc)}), 400
    return jsonify({'handle': handle, 'value': value})
