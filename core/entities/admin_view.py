from enum import Enum


class AdminView(str, Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    USERS = "users"
    POSTS = "posts"
    COMMENTS = "comments"
    TRANSACTIONS = "transactions"
    PACKAGES = "packages"
    STATISTICS = "statistics"
    ANNOUNCEMENTS = "announcements"
    SETTINGS = "settings"


SECTIONS = tuple(v for v in AdminView if v not in (AdminView.LOGIN, AdminView.DASHBOARD))
