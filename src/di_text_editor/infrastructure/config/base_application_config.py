from pydantic import BaseModel


class BaseApplicationConfig(BaseModel):
    """Base configuration that every application config inherits."""
    app_name: str
    version: str = "1.0.0"

    stage: str = "local"  # local | cicd | prod
