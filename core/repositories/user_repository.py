from abc import ABC, abstractmethod
from typing import Optional, List, Tuple
from core.entities.user import User
from core.entities.transaction import Transaction


class UserRepository(ABC):
    @abstractmethod
    def list_users(self) -> List[User]:...

    @abstractmethod
    def list_user_choices(self) -> List[Tuple[int, str, str]]:...

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:...

    @abstractmethod
    def update_status(self, user_id: int, status: str) -> User:...

    @abstractmethod
    def update_role(self, user_id: int, role: str) -> User:...

    # Пополнение: запись в журнал и изменение баланса - одна атомарная операция
    @abstractmethod
    def credit_with_transaction(self, user_id: int, amount: int, type: str, status: str,
                                description: Optional[str] = None) -> Tuple[User, Transaction]:...

    @abstractmethod
    def get_transaction(self, tx_id: int) -> Optional[Transaction]:...

    @abstractmethod
    def delete_transaction(self, tx_id: int) -> None:...

    @abstractmethod
    def list_transactions(self) -> List[Transaction]:...
