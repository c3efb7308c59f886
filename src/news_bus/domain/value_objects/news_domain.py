"""新闻领域 / 子领域值对象"""

from dataclasses import dataclass, field
from enum import Enum

from ...shared.exceptions import InvalidArgumentError


class NewsDomain(str, Enum):
    """新闻领域（封闭集合）"""

    POLITICS = "politics"
    SPORTS = "sports"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    TECH = "tech"
    ECONOMY = "economy"


@dataclass(frozen=True)
class NewsSubdomain:
    """
    新闻子领域值对象

    每个子领域归属于唯一的领域，构造后不可变。
    相等性只按名称判断：同名子领域视为同一个子领域。
    """

    name: str
    domain: NewsDomain = field(compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("子领域名称不能为空", details={"name": self.name})
        if not isinstance(self.domain, NewsDomain):
            raise InvalidArgumentError(
                "子领域必须归属于 NewsDomain",
                details={"name": self.name, "domain": self.domain},
            )

    def __str__(self) -> str:
        return f"{self.domain.value}/{self.name}"
