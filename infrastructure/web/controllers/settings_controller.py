from dataclasses import asdict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.use_cases.settings_use_cases import get_settings, save_settings
from infrastructure.db.sqlite_catalog import SQLiteSettingsRepository
from infrastructure.web.dependencies import get_settings_repo, get_current_session


router = APIRouter(prefix="/settings", tags=["settings"], dependencies=[Depends(get_current_session)])


class AppSettingsModel(BaseModel):
    app_name: str
    primary_color: str
    secondary_color: str
    logo_url: str = ""


@router.get("", response_model=AppSettingsModel)
def get_app_settings(repo: SQLiteSettingsRepository = Depends(get_settings_repo)):
    return AppSettingsModel(**asdict(get_settings(repo)))

@router.put("", response_model=AppSettingsModel)
def put_app_settings(payload: AppSettingsModel, repo: SQLiteSettingsRepository = Depends(get_settings_repo)):
    return AppSettingsModel(**asdict(save_settings(repo, **payload.model_dump())))
