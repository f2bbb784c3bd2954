"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from pydantic import BaseModel


class VoterResult(BaseModel):
    serial: str
    marathiName: str
    englishName: str
    polling: str
    voteFor: str
    vote: str
    message: str


class VoterSample(BaseModel):
    english: str
    marathi: str


class DebugResponse(BaseModel):
    ready: bool
    totalVoters: int
    sample: list[VoterSample]


class ErrorResponse(BaseModel):
    error: str
