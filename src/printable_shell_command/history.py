import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from printable_shell_command.ui import dim, green_text, red_text

DEFAULT_HISTORY_FILE = Path.home() / ".psc_history.log"


def default_history_file() -> Path:
    return Path(os.environ.get("PSC_HISTORY", DEFAULT_HISTORY_FILE))


class LogItem:
    def __init__(self, now_str: str, command: str, returncode: int):
        self.now_str = now_str
        self.command = command
        self.returncode = returncode

    def to_json(self):
        return json.dumps(self.__dict__)

    @staticmethod
    def from_json(json_str: str):
        return LogItem(**json.loads(json_str))

    def print(self):
        if self.returncode == 0:
            status = green_text("  ✓")
        else:
            status = red_text(f"  [{self.returncode}]")
        print(f"  {dim(self.now_str)}{status}")
        for line in self.command.splitlines():
            print(f"    {line}")


class Logger:
    def __init__(self, log_file: Optional[Union[str, Path]] = None):
        self.log_file = Path(log_file) if log_file else default_history_file()
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.log_file.touch(exist_ok=True)

    def read_logs(self, last: Optional[int] = None) -> list[LogItem]:
        with self.log_file.open("r", encoding="utf-8") as f:
            lines = [line.strip() for line in f.readlines() if line.strip()]
        if last is not None:
            lines = lines[-last:] if last > 0 else []
        return [LogItem.from_json(line) for line in lines]

    def read_last_log(self) -> Optional[LogItem]:
        logs = self.read_logs(last=1)
        return logs[0] if logs else None

    def log_one(self, command: str, returncode: int) -> LogItem:
        now_str = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        log_item = LogItem(now_str, command, returncode)
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(log_item.to_json() + "\n")
        return log_item
