import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID
from media_gateway.api.db.base import Base

class Video(Base):
    __tablename__ = "videos"

    video_id = sa.Column(UUID(as_uuid=True), primary_key=True,
                         server_default=sa.text("gen_random_uuid()"))
    # Blob key inside the configured bucket, not a URI
    video_path = sa.Column(sa.Text, nullable=False)

    __table_args__ = (
        sa.Index("idx_videos_video_path", "video_path"),
    )

    def to_dict(self) -> dict:
        return {
            "video_id": str(self.video_id),
            "video_path": self.video_path,
        }
