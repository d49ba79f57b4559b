from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.use_cases.package_use_cases import list_packages, create_package, update_package, delete_package
from infrastructure.db.sqlite_catalog import SQLitePackageRepository
from infrastructure.web.dependencies import get_package_repo, get_current_session
from infrastructure.web.schemas import Notice


router = APIRouter(prefix="/packages", tags=["packages"], dependencies=[Depends(get_current_session)])


class PackageRequest(BaseModel):
    name: str
    description: Optional[str] = ""
    price: int
    duration_days: int
    features: List[str] = []
    is_active: bool = True

# при редактировании is_active не трогаем, если он не передан
class PackageUpdateRequest(BaseModel):
    name: str
    description: Optional[str] = ""
    price: int
    duration_days: int
    features: List[str] = []
    is_active: Optional[bool] = None

class PackageItem(BaseModel):
    id: int
    name: str
    description: str
    price: int
    duration_days: int
    features: List[str]
    is_active: bool
    created_at: str


@router.get("", response_model=List[PackageItem])
def get_packages(repo: SQLitePackageRepository = Depends(get_package_repo)):
    return [PackageItem(**asdict(p)) for p in list_packages(repo)]

@router.post("", response_model=PackageItem, status_code=201)
def post_package(payload: PackageRequest, repo: SQLitePackageRepository = Depends(get_package_repo)):
    package = create_package(repo, **payload.model_dump())
    return PackageItem(**asdict(package))

@router.put("/{package_id}", response_model=PackageItem)
def put_package(package_id: int, payload: PackageUpdateRequest, repo: SQLitePackageRepository = Depends(get_package_repo)):
    package = update_package(repo, package_id, **payload.model_dump())
    return PackageItem(**asdict(package))

@router.delete("/{package_id}", response_model=Notice)
def remove_package(package_id: int, repo: SQLitePackageRepository = Depends(get_package_repo)):
    delete_package(repo, package_id)
    return Notice(message="Package deleted")
