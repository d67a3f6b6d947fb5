"""Configuration module for treefind."""

from dataclasses import dataclass, field

from treefind.matcher import BasicFileMatch


@dataclass
class MatchConfig:
    include_hidden: bool = False
    include_vcs_dirs: bool = False
    case_sensitive: bool = False
    ignore_extensions: list[str] = field(default_factory=list)


@dataclass
class Config:
    follow_symlinks: bool = True
    sort: str = "name"
    match: MatchConfig = field(default_factory=MatchConfig)

    def build_matcher(
        self,
        pattern: str | None = None,
        *,
        entry_type: str | None = None,
        include_hidden: bool = False,
        include_vcs_dirs: bool = False,
        case_sensitive: bool = False,
        ignore_extensions: tuple[str, ...] = (),
        file_types: tuple[str, ...] = (),
    ) -> BasicFileMatch:
        """Build the default matcher, with command line flags layered over the config."""
        return BasicFileMatch(
            ignore_dir_results=entry_type == "f",
            ignore_file_results=entry_type == "d",
            ignore_hidden=not (include_hidden or self.match.include_hidden),
            ignore_vcs_dirs=not (include_vcs_dirs or self.match.include_vcs_dirs),
            ignore_file_extensions=[*self.match.ignore_extensions, *ignore_extensions],
            match_file_types=list(file_types),
            pattern=pattern,
            case_sensitive=case_sensitive or self.match.case_sensitive,
        )
