# builder_server/schemas.py

from pydantic import BaseModel


class Credentials(BaseModel):
    username: str | None = None
    password: str | None = None


class Brick(BaseModel):
    """
    A single placed brick. Position, footprint and rotation are free numbers;
    color is a packed RGB integer. Nothing else is checked.
    """
    x: float | None = None
    y: float | None = None
    z: float | None = None
    width: float | None = None
    depth: float | None = None
    color: int | None = None
    rotation: float | None = None


class SaveBuildRequest(BaseModel):
    userId: str | None = None
    name: str | None = None
    bricks: list[Brick] = []
