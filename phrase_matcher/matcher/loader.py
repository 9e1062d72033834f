from __future__ import annotations

from pathlib import Path
from typing import List, Union

from loguru import logger


def parse_phrase_lines(text: str) -> List[str]:
    """每行一个短语；去除首尾空白，跳过空行。"""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_phrases(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    if not path.exists():
        logger.warning("短语文件不存在: {}", path)
        raise FileNotFoundError(f"短语文件不存在: {path}")
    phrases = parse_phrase_lines(path.read_text(encoding="utf-8"))
    logger.info("从 {} 加载短语 {} 条", path, len(phrases))
    return phrases
