from dataclasses import dataclass


@dataclass
class DashboardStats:
    total_users: int = 0
    total_posts: int = 0
    total_comments: int = 0
    total_transactions: int = 0
    total_revenue: int = 0
    active_users: int = 0
    premium_users: int = 0
    blocked_users: int = 0
