import re

from loguru import logger

from core.entities.app_settings import AppSettings
from core.errors import ValidationFailure
from core.repositories.catalog_repository import SettingsRepository


HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def get_settings(repo: SettingsRepository) -> AppSettings:
    return repo.load()


def save_settings(repo: SettingsRepository, app_name: str, primary_color: str,
                  secondary_color: str, logo_url: str = "") -> AppSettings:
    app_name = (app_name or "").strip()
    if not app_name:
        raise ValidationFailure("App name is required")
    for color in (primary_color, secondary_color):
        if not color or not HEX_COLOR.match(color):
            raise ValidationFailure(f"Invalid colour '{color}', expected #rrggbb")
    saved = repo.save(AppSettings(
        app_name=app_name,
        primary_color=primary_color.lower(),
        secondary_color=secondary_color.lower(),
        logo_url=(logo_url or "").strip(),
    ))
    logger.info(f"App settings saved for '{saved.app_name}'")
    return saved
