"""
Ownership check shared by the activation use cases.
"""
import uuid
from typing import Optional

from core.domain.exceptions import LicenseAccessDeniedError, LicenseNotFoundError
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository


async def get_owned_license(
    license_repository: LicenseRepository,
    license_id: uuid.UUID,
    viewer_id: Optional[int],
) -> License:
    """
    Load a license and make sure the viewer owns it.

    Raises:
        LicenseNotFoundError: If the license does not exist
        LicenseAccessDeniedError: If the viewer is not the owner
    """
    license = await license_repository.find_by_id(license_id)
    if not license:
        raise LicenseNotFoundError(f"License {license_id} not found")
    if not license.is_owned_by(viewer_id):
        raise LicenseAccessDeniedError(f"License {license_id} is not yours")
    return license
