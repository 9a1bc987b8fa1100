from dataclasses import dataclass, replace
from typing import List, Optional

AUTO = "auto"


@dataclass(frozen=True)
class InitSystemProfile:
    """
    Everything platform specific about one init system.

    Commands and the service file path may contain a {daemon} field which is
    filled in by for_daemon().
    """
    name: str
    enable_command: str
    disable_command: str
    start_command: str
    stop_command: str
    service_file_path: str
    file_mode: int

    def for_daemon(self, daemon: str) -> "InitSystemProfile":
        return replace(
            self,
            enable_command=self.enable_command.format(daemon=daemon),
            disable_command=self.disable_command.format(daemon=daemon),
            start_command=self.start_command.format(daemon=daemon),
            stop_command=self.stop_command.format(daemon=daemon),
            service_file_path=self.service_file_path.format(daemon=daemon),
        )

    @property
    def template_name(self) -> str:
        return f"service.{self.name}"


@dataclass(frozen=True)
class RunConfig:
    quiet: bool = False
    verbose_level: int = 0
    auto: bool = False
    dry_run: bool = False
    bindir: str = AUTO
    init_system: str = AUTO
    start: bool = False
    enable: bool = False
    stop: bool = False
    install: Optional[str] = None # None, "auto" or an explicit path
    uninstall: bool = False
    no_color: bool = False
    help: bool = False

    @property
    def has_work(self) -> bool:
        # enable on its own is not enough
        return bool(self.install or self.start or self.stop or self.uninstall)

    def requested_actions(self) -> List[str]:
        """Requested actions, in the order the executor runs them."""
        flags = [
            ("stop", self.stop),
            ("install", bool(self.install)),
            ("enable", self.enable),
            ("uninstall", self.uninstall),
            ("start", self.start),
        ]
        return [name for name, wanted in flags if wanted]


@dataclass(frozen=True)
class ResolvedPaths:
    bindir: str
    init_system: str
    profile: InitSystemProfile
