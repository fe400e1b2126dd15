from pydantic import BaseModel


class ServicesStatus(BaseModel):
    database: str
    ai_client: str


class HealthCheckResponse(BaseModel):
    version: str
    status: str
    timestamp: str
    services: ServicesStatus
