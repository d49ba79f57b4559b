from typing import Dict, List, Optional

from core.entities.admin_view import AdminView, SECTIONS
from core.errors import ValidationFailure


MENU: Dict[AdminView, Dict[str, str]] = {
    AdminView.USERS: {"title": "Manage users", "description": "Block, unblock and change roles"},
    AdminView.POSTS: {"title": "Manage posts", "description": "Review and moderate posts"},
    AdminView.COMMENTS: {"title": "Manage comments", "description": "Moderate comments and block authors"},
    AdminView.TRANSACTIONS: {"title": "Manage transactions", "description": "Top-ups and cancellations"},
    AdminView.PACKAGES: {"title": "Manage packages", "description": "Premium subscription packages"},
    AdminView.STATISTICS: {"title": "Statistics", "description": "Application totals"},
    AdminView.ANNOUNCEMENTS: {"title": "Announcements", "description": "Broadcast to users"},
    AdminView.SETTINGS: {"title": "App settings", "description": "Branding configuration"},
}

ACTIONS = ("login", "open", "back", "logout")


def menu() -> List[Dict[str, str]]:
    return [{"view": view.value, **MENU[view]} for view in SECTIONS]


def navigate(current: AdminView, action: str, target: Optional[AdminView] = None) -> AdminView:
    """Переходы: login -> dashboard, dashboard -> раздел, раздел -> dashboard, любой -> login"""
    if action == "logout":
        return AdminView.LOGIN
    if action == "login" and current is AdminView.LOGIN:
        return AdminView.DASHBOARD
    if action == "open" and current is AdminView.DASHBOARD and target in SECTIONS:
        return target
    if action == "back" and current in SECTIONS:
        return AdminView.DASHBOARD
    raise ValidationFailure(f"Cannot '{action}' from {current.value}")
