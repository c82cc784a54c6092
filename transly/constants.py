class RedisPrefix:
    HISTORY = "history"


class HistoryKey:
    ORDER = f"{RedisPrefix.HISTORY}:order"  # list: 삽입 순서대로 entry id
    ENTRIES = f"{RedisPrefix.HISTORY}:entries"  # hash: id → entry JSON


class Limits:
    MAX_TEXT_LENGTH = 5000
