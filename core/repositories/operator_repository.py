from abc import ABC, abstractmethod
from typing import Optional
from core.entities.operator import Operator


class OperatorRepository(ABC):
    @abstractmethod
    def create_operator(self, email: str, password_hash: str) -> Operator:...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Operator]:...

    @abstractmethod
    def get_by_id(self, operator_id: int) -> Optional[Operator]:...
