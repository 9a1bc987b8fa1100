from dataclasses import dataclass

from .runner import CommandRunner
from ..config import SetupSettings
from ..init_systems import profile_for
from ..init_systems.detect import find_bindir, detect_init_system
from ..models.service_info import RunConfig, ResolvedPaths
from ..output.console import Reporter


@dataclass(frozen=True)
class ExecutionContext:
    config: RunConfig
    settings: SetupSettings
    resolved: ResolvedPaths
    runner: CommandRunner
    reporter: Reporter
    root: str = "/" # filesystem the service files live on


def resolve_paths(config: RunConfig, settings: SetupSettings, root: str = "/") -> ResolvedPaths:
    """Run both probes, skipping whichever value was given on the command line."""
    bindir = find_bindir(
        settings.daemon,
        settings.bindir_candidates,
        bindir=config.bindir,
        root=root,
    )
    init_system = detect_init_system(config.init_system, root=root)
    return ResolvedPaths(
        bindir=bindir,
        init_system=init_system,
        profile=profile_for(init_system, settings.daemon),
    )
