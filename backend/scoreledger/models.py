from scoreledger import db
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    @property
    def identity(self):
        """Identity proofs and grants are bound to."""
        return self.username

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }


class CiphertextHandle(db.Model):
    """Registry entry for an opaque reference to an encrypted value.

    No ciphertext bytes are stored, only the handle the oracle issued.
    """
    __tablename__ = 'ciphertext_handle'
    handle = db.Column(db.String(66), primary_key=True)
    kind = db.Column(db.String(16), nullable=False, default='euint32')
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)


class PlayerRecord(db.Model):
    __tablename__ = 'player_record'
    id = db.Column(db.Integer, primary_key=True)
    player = db.Column(db.String(64), unique=True, nullable=False, index=True)
    best_handle = db.Column(db.String(66), db.ForeignKey('ciphertext_handle.handle'), nullable=True)
    submissions = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)
    best = db.relationship('CiphertextHandle', foreign_keys=[best_handle])

    def to_dict(self):
        return {
            'player': self.player,
            'handle': self.best_handle,
            'submissions': self.submissions,
        }


class AccessGrant(db.Model):
    __tablename__ = 'access_grant'
    __table_args__ = (db.UniqueConstraint('handle', 'grantee', name='uq_access_grant_handle_grantee'),)
    id = db.Column(db.Integer, primary_key=True)
    handle = db.Column(db.String(66), db.ForeignKey('ciphertext_handle.handle'), nullable=False, index=True)
    grantee = db.Column(db.String(64), nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)


class MockCiphertext(db.Model):
    """Ciphertext table of the in-process mock oracle.

    Belongs to the oracle, not the ledger: the ledger only ever reads
    ``ciphertext_handle``. Stored so handles survive a restart.
    """
    __tablename__ = 'mock_ciphertext'
    handle = db.Column(db.String(66), primary_key=True)
    kind = db.Column(db.String(16), nullable=False)
    value = db.Column(db.BigInteger, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
