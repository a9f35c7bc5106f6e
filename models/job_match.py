from pydantic import BaseModel


class JobMatch(BaseModel):
    """A matched profession and how well it fits the person, in percent"""
    job: str
    percentage: float
