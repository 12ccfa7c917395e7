import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID
from media_gateway.api.db.base import Base

class User(Base):
    __tablename__ = "users"

    user_id = sa.Column(UUID(as_uuid=True), primary_key=True,
                        server_default=sa.text("gen_random_uuid()"))
    username = sa.Column(sa.Text, nullable=False)
    email = sa.Column(sa.Text, nullable=False)

    def to_dict(self) -> dict:
        return {
            "user_id": str(self.user_id),
            "username": self.username,
            "email": self.email,
        }
