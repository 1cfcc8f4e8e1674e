from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Msg(str, Enum):
    READING = "reading"
    NUM_FILES = "num_files"
    CANT_READ_PORT = "cant_read_port"
    SELECT_DRIVE = "select_drive"
    NO_DRIVES = "no_drives"
    DRIVE_ENTRY = "drive_entry"
    DRIVE_UNMOUNTED = "drive_unmounted"
    CHOOSE_LANGUAGE = "choose_language"


DEFAULT_LANGUAGE = "en"

CATALOGS: dict[str, dict[Msg, str]] = {
    "en": {
        Msg.READING: "Reading {0}...",
        Msg.NUM_FILES: "{0}: {1} files found",
        Msg.CANT_READ_PORT: "Can't read {0}",
        Msg.SELECT_DRIVE: "Select drive",
        Msg.NO_DRIVES: "Insert a drive",
        Msg.DRIVE_ENTRY: "{0} {1}",
        Msg.DRIVE_UNMOUNTED: "{0} (not mounted)",
        Msg.CHOOSE_LANGUAGE: "Language",
    },
    "ko": {
        Msg.READING: "{0} 읽는 중...",
        Msg.NUM_FILES: "{0}: 파일 {1}개",
        Msg.CANT_READ_PORT: "{0}을(를) 읽을 수 없음",
        Msg.SELECT_DRIVE: "드라이브 선택",
        Msg.NO_DRIVES: "드라이브를 삽입하세요",
        Msg.DRIVE_ENTRY: "{0} {1}",
        Msg.DRIVE_UNMOUNTED: "{0} (마운트 안 됨)",
        Msg.CHOOSE_LANGUAGE: "언어",
    },
}


# Each language is listed under its own name.
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "ko": "한국어",
}


class Messages:
    """Formats display strings for one language, falling back to English."""

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        if language not in CATALOGS:
            logger.warning("Unknown language %r, using %s", language, DEFAULT_LANGUAGE)
            language = DEFAULT_LANGUAGE
        self.language = language
        self._catalog = CATALOGS[language]
        self._fallback = CATALOGS[DEFAULT_LANGUAGE]

    def get(self, key: Msg, *params: object) -> str:
        template = self._catalog.get(key) or self._fallback[key]
        return template.format(*params)


def available_languages() -> list[str]:
    return sorted(CATALOGS)
