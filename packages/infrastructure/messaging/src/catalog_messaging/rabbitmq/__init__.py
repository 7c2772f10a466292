from .broker import RabbitMQMessageBroker
from .connection import RabbitMQConnectionManager

__all__ = ["RabbitMQConnectionManager", "RabbitMQMessageBroker"]
