from core.entities.stats import DashboardStats
from core.entities.transaction import CREDIT_TYPES
from core.repositories.content_repository import ContentRepository
from core.repositories.user_repository import UserRepository


def compute_stats(users: UserRepository, content: ContentRepository) -> DashboardStats:
    all_users = users.list_users()
    transactions = users.list_transactions()
    return DashboardStats(
        total_users=len(all_users),
        total_posts=content.count_posts(),
        total_comments=content.count_comments(),
        total_transactions=len(transactions),
        total_revenue=sum(t.amount for t in transactions if t.type in CREDIT_TYPES),
        active_users=sum(1 for u in all_users if u.status == "active"),
        premium_users=sum(1 for u in all_users if u.is_premium or u.role == "premium"),
        blocked_users=sum(1 for u in all_users if u.status == "blocked"),
    )
