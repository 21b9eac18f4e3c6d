from __future__ import annotations
from pydantic import BaseModel
from typing import List, Optional
import yaml

class GameCfg(BaseModel):
    tokens: List[int] = [1, 1, 2, 3, 5, 8, 13, 21]

class OutputCfg(BaseModel):
    transcript: Optional[str] = None   # .csv or .parquet
    report: Optional[str] = None       # markdown report path
    plot: bool = True

class LoggingCfg(BaseModel):
    level: str = "INFO"

class FullConfig(BaseModel):
    game: GameCfg = GameCfg()
    output: OutputCfg = OutputCfg()
    logging: LoggingCfg = LoggingCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
