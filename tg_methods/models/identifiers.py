from typing import NewType


# all four are plain ints on the wire and at runtime: ChatId(5) == 5, int(ChatId(5)) == 5.
# type checkers treat them as distinct, so a UserId can't be passed where a ChatId is expected.
# telegram ids fit in a signed 64 bit integer.

ChatId = NewType('ChatId', int)
UserId = NewType('UserId', int)
MessageId = NewType('MessageId', int)
UpdateId = NewType('UpdateId', int)

int64_min: int = -2 ** 63
int64_max: int = 2 ** 63 - 1
