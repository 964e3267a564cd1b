from pydantic import BaseModel, ConfigDict


class CorsPolicy(BaseModel):
    allow_origin: str = "*"
    allow_methods: str = "GET,POST,OPTIONS"
    allow_headers: str = "Content-Type"

    # Shared by every response, so it must not be mutated
    model_config = ConfigDict(frozen=True)
