from abc import ABC, abstractmethod
from typing import List
import uuid

from media_gateway.api.model.user import User
from media_gateway.api.model.video import Video


class IUserRepository(ABC):
    @abstractmethod
    async def create_user(self, username: str, email: str) -> User:
        pass

    @abstractmethod
    async def list_users(self) -> List[User]:
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: uuid.UUID) -> User:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User:
        pass

    @abstractmethod
    async def get_user_by_email(self, email: str) -> User:
        pass


class IVideoRepository(ABC):
    @abstractmethod
    async def create_video(self, video_path: str) -> Video:
        pass

    @abstractmethod
    async def list_videos(self) -> List[Video]:
        pass

    @abstractmethod
    async def get_video_by_id(self, video_id: uuid.UUID) -> Video:
        pass

    @abstractmethod
    async def get_video_by_path(self, video_path: str) -> Video:
        pass
