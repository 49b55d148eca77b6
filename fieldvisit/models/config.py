import os
from pydantic import field_validator, BaseModel
from typing import Optional

from .. import __home__


class Settings(BaseModel):
    log_level: int = 20  # 10 debug, 20 info, 30 warning, 40 error, 50 critical
    log_path: Optional[str] = None  # folder for dated log files, defaults to <home>/log
    log_append: bool = True  # append to an existing log file instead of overwriting it

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        if v < 0 or v > 50:
            raise ValueError(f"log_level must be between 0 and 50, found {v}")
        return v

    @property
    def log_folder(self):
        if self.log_path:
            return self.log_path
        return os.path.join(__home__, "log")
