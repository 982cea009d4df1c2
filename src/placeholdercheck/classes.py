from dataclasses import dataclass, field

DEFAULT_SOURCE_CANDIDATES: tuple[str, ...] = (
    "zh-cn.json",
    "zh-CN.json",
    "zh_cn.json",
    "zh_CN.json",
)

DEFAULT_IGNORES: frozenset[str] = frozenset(
    {"package.json", "package-lock.json", "npm-shrinkwrap.json"}
)

# Token -> occurrence count, counts are always >= 1
PlaceholderMap = dict[str, int]


@dataclass(frozen=True)
class CountMismatch:
    token: str
    expected: int
    actual: int


@dataclass(frozen=True)
class PlaceholderDiff:
    missing: list[str] = field(default_factory=list)
    extra: list[str] = field(default_factory=list)
    count_mismatch: list[CountMismatch] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (self.missing or self.extra or self.count_mismatch)


@dataclass(frozen=True)
class PlaceholderMismatch:
    key: str
    diff: PlaceholderDiff
    expected: list[str]
    actual: list[str]
    type: str = "placeholder-mismatch"


@dataclass(frozen=True)
class KeyWarning:
    type: str
    key: str
    actual_type: str | None = None


@dataclass(frozen=True)
class FileOutcome:
    file: str
    errors: list[PlaceholderMismatch] = field(default_factory=list)
    warnings: list[KeyWarning] = field(default_factory=list)


@dataclass(frozen=True)
class Report:
    ok: bool
    directory: str
    source_file: str
    files_checked: list[str]
    failures: list[FileOutcome]
    warnings_only: list[FileOutcome]


@dataclass
class CheckOptions:
    cwd: str = "."
    source: str | None = None
    ignore: list[str] = field(default_factory=list)
    keyword_prefixes: list[str] = field(default_factory=list)
    default_ignores: frozenset[str] = DEFAULT_IGNORES
    source_candidates: tuple[str, ...] = DEFAULT_SOURCE_CANDIDATES
    jobs: int = 1
