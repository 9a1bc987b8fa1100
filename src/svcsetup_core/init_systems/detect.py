import os
from typing import List

from . import InitSystem
from ..core.errors import DetectionError
from ..models.service_info import AUTO
from ..utils.paths import on_root, is_executable_file


def find_bindir(daemon: str, candidates: List[str], bindir: str = AUTO,
                root: str = "/") -> str:
    """
    Locate the directory holding the daemon executable.

    An explicit bindir is returned as is. Otherwise the candidates are
    scanned in order and the first one containing an executable named
    after the daemon wins.
    """
    if bindir != AUTO:
        return bindir

    for directory in candidates:
        if is_executable_file(on_root(root, os.path.join(directory, daemon))):
            return directory

    raise DetectionError(
        f"could not find an executable {daemon} in {', '.join(candidates)}; "
        f"use --bindir to give its directory"
    )


def _init_is_systemd(root: str) -> bool:
    init = on_root(root, "/sbin/init")
    if not os.path.islink(init):
        return False
    return "systemd" in os.readlink(init)


def detect_init_system(init_system: str = AUTO, root: str = "/") -> str:
    """
    Guess the init system of the host, first matching probe wins.

    An explicit init_system is validated against the known names and
    returned without probing.
    """
    if init_system != AUTO:
        return InitSystem.from_name(init_system).profile.name

    if _init_is_systemd(root):
        return InitSystem.SYSTEMD.profile.name
    if os.path.isdir(on_root(root, "/usr/lib/upstart")):
        return InitSystem.UPSTART.profile.name
    if os.path.exists(on_root(root, "/etc/redhat-release")):
        return InitSystem.RHEL6.profile.name
    if os.path.exists(on_root(root, "/etc/debian_version")):
        return InitSystem.DEBIAN.profile.name
    # Amazon Linux: RHEL-like release file but no redhat-release, legacy tooling
    if os.path.exists(on_root(root, "/etc/system-release")) and \
            is_executable_file(on_root(root, "/sbin/chkconfig")):
        return InitSystem.RHEL6.profile.name
    if os.path.isdir(on_root(root, "/etc/init.d")):
        return InitSystem.SYSVINIT.profile.name

    raise DetectionError(
        "could not determine the init system; "
        f"use --initsys with one of: {', '.join(InitSystem.names())}"
    )
