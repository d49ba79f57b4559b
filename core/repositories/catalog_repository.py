from abc import ABC, abstractmethod
from typing import List, Dict, Any
from core.entities.package import Package
from core.entities.announcement import Announcement
from core.entities.app_settings import AppSettings


class PackageRepository(ABC):
    @abstractmethod
    def list_packages(self) -> List[Package]:...

    @abstractmethod
    def create_package(self, data: Dict[str, Any]) -> Package:...

    @abstractmethod
    def update_package(self, package_id: int, data: Dict[str, Any]) -> Package:...

    @abstractmethod
    def delete_package(self, package_id: int) -> None:...


class AnnouncementRepository(ABC):
    @abstractmethod
    def list_announcements(self) -> List[Announcement]:...

    @abstractmethod
    def create_announcement(self, title: str, content: str, type: str, is_active: bool) -> Announcement:...

    @abstractmethod
    def get_announcement(self, announcement_id: int) -> Announcement:...

    @abstractmethod
    def set_active(self, announcement_id: int, is_active: bool) -> Announcement:...


class SettingsRepository(ABC):
    @abstractmethod
    def load(self) -> AppSettings:...

    @abstractmethod
    def save(self, app_settings: AppSettings) -> AppSettings:...
