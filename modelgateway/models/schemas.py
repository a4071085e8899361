"""Transcription response bodies returned by audio transcription pipelines"""
from typing import Optional

from pydantic import BaseModel


class TranscriptionJson(BaseModel):
    text: str


class TranscriptionWord(BaseModel):
    word: str
    start: float
    end: float


class TranscriptionSegment(BaseModel):
    id: int
    seek: int
    start: float
    end: float
    text: str
    tokens: list[int]
    temperature: float
    avg_logprob: float
    compression_ratio: float
    no_speech_prob: float


class TranscriptionVerboseJson(BaseModel):
    task: str = "transcribe"
    language: str
    duration: float
    text: str
    words: Optional[list[TranscriptionWord]] = None
    segments: Optional[list[TranscriptionSegment]] = None
