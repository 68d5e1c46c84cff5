"""
Unit tests for License entity.
"""
import re
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from licenses.domain.license import License, generate_license_key


class TestLicenseKeyGeneration:
    """Tests for license key generation."""

    def test_format(self):
        key = generate_license_key()
        assert re.fullmatch(r"LS(-[A-Z0-9]{4}){4}", key)

    def test_custom_prefix(self):
        assert generate_license_key(prefix="RAY").startswith("RAY-")

    def test_keys_differ(self):
        assert generate_license_key() != generate_license_key()


class TestLicense:
    """Tests for License entity."""

    def test_create(self):
        purchasable_id = uuid.uuid4()
        license = License.create(user_id=7, purchasable_id=purchasable_id)

        assert license.user_id == 7
        assert license.purchasable_id == purchasable_id
        assert license.key.startswith("LS-")
        assert license.expires_at is None

    def test_ownership(self):
        license = License.create(user_id=7, purchasable_id=uuid.uuid4())

        assert license.is_owned_by(7)
        assert not license.is_owned_by(8)
        assert not license.is_owned_by(None)

    def test_expiry(self):
        now = datetime.now(timezone.utc)
        expired = License.create(
            user_id=7, purchasable_id=uuid.uuid4(), expires_at=now - timedelta(days=1)
        )
        valid = License.create(
            user_id=7, purchasable_id=uuid.uuid4(), expires_at=now + timedelta(days=1)
        )
        perpetual = License.create(user_id=7, purchasable_id=uuid.uuid4())

        assert expired.is_expired()
        assert not valid.is_expired()
        assert not perpetual.is_expired()

    def test_key_required(self):
        with pytest.raises(ValueError, match="key is required"):
            License(
                id=uuid.uuid4(),
                user_id=7,
                purchasable_id=uuid.uuid4(),
                key="",
                created_at=datetime.now(timezone.utc),
            )
