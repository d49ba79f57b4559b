from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from core.entities.package import Package
from core.errors import ValidationFailure
from core.repositories.catalog_repository import PackageRepository


def _package_data(name: str, description: Optional[str], price: int, duration_days: int,
                  features: Sequence[str], is_active: Optional[bool]) -> Dict[str, Any]:
    name = (name or "").strip()
    if not name:
        raise ValidationFailure("Package name is required")
    if price is None or price <= 0:
        raise ValidationFailure("Price must be positive")
    if duration_days is None or int(duration_days) != duration_days or duration_days <= 0:
        raise ValidationFailure("Duration must be a positive number of days")
    return {
        "name": name,
        "description": (description or "").strip(),
        "price": int(price),
        "duration_days": int(duration_days),
        "features": [f.strip() for f in features or [] if f and f.strip()],
        "is_active": None if is_active is None else bool(is_active),
    }


def list_packages(repo: PackageRepository) -> List[Package]:
    return repo.list_packages()


def create_package(repo: PackageRepository, name: str, description: Optional[str], price: int,
                   duration_days: int, features: Sequence[str], is_active: bool = True) -> Package:
    data = _package_data(name, description, price, duration_days, features, is_active)
    package = repo.create_package(data)
    logger.info(f"Package {package.id} '{package.name}' created")
    return package


def update_package(repo: PackageRepository, package_id: int, name: str, description: Optional[str],
                   price: int, duration_days: int, features: Sequence[str],
                   is_active: Optional[bool] = None) -> Package:
    data = _package_data(name, description, price, duration_days, features, is_active)
    package = repo.update_package(package_id, data)
    logger.info(f"Package {package_id} updated")
    return package


def delete_package(repo: PackageRepository, package_id: int) -> None:
    repo.delete_package(package_id)
    logger.info(f"Package {package_id} deleted")
