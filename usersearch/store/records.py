from typing import Iterable, Iterator, Tuple

from pydantic import BaseModel, ConfigDict

from ..schemas import User


class UserRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    first_name: str
    last_name: str
    age: int = 0
    gender: str = ""
    about: str = ""

    # passthrough fields, never read by the evaluator
    guid: str = ""
    is_active: bool = False
    balance: str = ""
    picture: str = ""
    eye_color: str = ""
    company: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    registered: str = ""
    favorite_fruit: str = ""

    @property
    def name(self) -> str:
        return self.first_name + " " + self.last_name

    def to_user(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            age=self.age,
            about=self.about,
            gender=self.gender,
        )


class RecordStore:
    """Read-only snapshot of user records, in load order.

    Built once before the app serves requests and shared by every
    evaluation; there is no write path.
    """

    def __init__(self, records: Iterable[UserRecord] = ()):
        self._records: Tuple[UserRecord, ...] = tuple(records)

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
