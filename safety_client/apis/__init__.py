from .auth_api import AuthApi
from .user_api import UserApi
from .location_api import LocationApi
from .alert_api import AlertApi
from .blockchain_api import BlockchainApi
from .ai_api import AiApi

__all__ = ["AuthApi", "UserApi", "LocationApi", "AlertApi", "BlockchainApi", "AiApi"]
