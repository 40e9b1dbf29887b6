"""열차 카탈로그

고정된 5개 노선과 좌석 수를 관리한다. 런타임에 수정되지 않는다.
"""

from __future__ import annotations

from typing import Optional

from railbook.models.booking import Train
from railbook.models.errors import UnknownTrain

TRAINS: tuple[Train, ...] = (
    Train(1, "Express A", "Mumbai", "Delhi", 100),
    Train(2, "Superfast B", "Kolkata", "Bangalore", 80),
    Train(3, "Intercity C", "Chennai", "Hyderabad", 60),
    Train(4, "Mail D", "Jaipur", "Lucknow", 50),
    Train(5, "Shatabdi E", "Ahmedabad", "Pune", 90),
)

_BY_ID: dict[int, Train] = {t.id: t for t in TRAINS}


def find_train(train_id: int) -> Optional[Train]:
    return _BY_ID.get(train_id)


def get_train(train_id: int) -> Train:
    """열차 ID → Train. 카탈로그에 없으면 UnknownTrain."""
    train = _BY_ID.get(train_id)
    if train is None:
        raise UnknownTrain(train_id)
    return train
