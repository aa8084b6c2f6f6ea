from app.core.schemas import CamelModel

class LikeToggle(CamelModel):
    user_id: str
