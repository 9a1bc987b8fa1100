from enum import Enum

from ..core.errors import UsageError
from ..models.service_info import InitSystemProfile


class InitSystem(Enum):
    """
    Supported init systems, each carrying its profile.

    This is the only place platform commands and service file locations are
    written down.
    """

    SYSTEMD = InitSystemProfile(
        name="systemd",
        enable_command="systemctl enable {daemon}",
        disable_command="systemctl disable {daemon}",
        start_command="systemctl start {daemon}",
        stop_command="systemctl stop {daemon}",
        service_file_path="/etc/systemd/system/{daemon}.service",
        file_mode=0o644,
    )
    RHEL6 = InitSystemProfile(
        name="rhel6",
        enable_command="chkconfig --add {daemon}",
        disable_command="chkconfig --del {daemon}",
        start_command="service {daemon} start",
        stop_command="service {daemon} stop",
        service_file_path="/etc/rc.d/init.d/{daemon}",
        file_mode=0o755,
    )
    UPSTART = InitSystemProfile(
        name="upstart",
        # upstart picks up job files on its own, reloading makes it immediate
        enable_command="initctl reload-configuration",
        disable_command="initctl reload-configuration",
        start_command="initctl start {daemon}",
        stop_command="initctl stop {daemon}",
        service_file_path="/etc/init/{daemon}.conf",
        file_mode=0o644,
    )
    SYSVINIT = InitSystemProfile(
        name="sysvinit",
        enable_command="chkconfig --add {daemon}",
        disable_command="chkconfig --del {daemon}",
        start_command="/etc/init.d/{daemon} start",
        stop_command="/etc/init.d/{daemon} stop",
        service_file_path="/etc/init.d/{daemon}",
        file_mode=0o755,
    )
    DEBIAN = InitSystemProfile(
        name="debian",
        enable_command="update-rc.d {daemon} defaults",
        disable_command="update-rc.d -f {daemon} remove",
        start_command="/etc/init.d/{daemon} start",
        stop_command="/etc/init.d/{daemon} stop",
        service_file_path="/etc/init.d/{daemon}",
        file_mode=0o755,
    )

    @property
    def profile(self) -> InitSystemProfile:
        return self.value

    @classmethod
    def names(cls):
        return [member.value.name for member in cls]

    @classmethod
    def from_name(cls, name: str) -> "InitSystem":
        for member in cls:
            if member.value.name == name:
                return member
        raise UsageError(
            f"unknown init system '{name}' (choose from: {', '.join(cls.names())})"
        )


def profile_for(name: str, daemon: str) -> InitSystemProfile:
    """Profile of the named init system with commands rendered for daemon."""
    return InitSystem.from_name(name).profile.for_daemon(daemon)
