import os
from pathlib import Path

from .context import ExecutionContext
from .errors import ActionError
from ..models.service_info import AUTO
from ..utils.paths import on_root


def render_template(template: str, placeholder: str, bindir: str) -> str:
    """Replace every occurrence of placeholder with bindir."""
    return template.replace(placeholder, bindir)


class ActionExecutor:
    """
    Runs the requested lifecycle actions.

    The order is fixed: stop, install, enable, uninstall, start. Requesting
    install and uninstall together installs the service and then removes it
    again; this is reported but not prevented.
    """

    def __init__(self, context: ExecutionContext):
        self.context = context
        self.config = context.config
        self.profile = context.resolved.profile
        self.reporter = context.reporter

    def run(self):
        actions = self.config.requested_actions()
        self.reporter.summary(self.context.resolved, actions)

        if self.config.install and self.config.uninstall:
            self.reporter.warn(
                "both install and uninstall requested: "
                "the service will be installed and then removed"
            )

        if self.config.stop:
            self.stop()
        if self.config.install:
            self.install()
        if self.config.enable:
            self.enable()
        if self.config.uninstall:
            self.uninstall()
        if self.config.start:
            self.start()

    # --- Actions ---

    def stop(self):
        self._run_command(self.profile.stop_command, "stopped")

    def install(self):
        target = self._install_target()
        template_path = self._template_path()
        mode = self.profile.file_mode

        if self.config.dry_run:
            self.reporter.plan(
                f"would write {template_path} to {target} "
                f"(mode {oct(mode)}, {self.context.settings.placeholder} -> {self.context.resolved.bindir})"
            )
            return

        content = self._read_template(template_path)
        rendered = render_template(
            content,
            self.context.settings.placeholder,
            self.context.resolved.bindir,
        )
        self.reporter.debug(2, f"rendered {template_path} ({len(rendered)} bytes)")

        try:
            Path(target).parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w") as f:
                f.write(rendered)
            os.chmod(target, mode)
        except OSError as e:
            raise ActionError(f"cannot install {target}: {e.strerror or e}")

        self.reporter.status(f"installed {target}")

    def enable(self):
        self._run_command(self.profile.enable_command, "enabled")

    def uninstall(self):
        service_file = on_root(self.context.root, self.profile.service_file_path)

        if self.config.dry_run:
            self.reporter.plan(f"would run: {self.profile.disable_command}")
            self.reporter.plan(f"would remove {service_file}")
            return

        # A failed disable aborts before the file is touched
        self._run_command(self.profile.disable_command, "disabled")
        try:
            os.unlink(service_file)
        except OSError as e:
            raise ActionError(f"cannot remove {service_file}: {e.strerror or e}")
        self.reporter.status(f"removed {service_file}")

    def start(self):
        self._run_command(self.profile.start_command, "started")

    # --- Helpers ---

    def _run_command(self, command: str, verb: str):
        if self.config.dry_run:
            self.reporter.plan(f"would run: {command}")
            return

        self.reporter.debug(1, f"running: {command}")
        status = self.context.runner.run(command)
        if status != 0:
            raise ActionError(f"'{command}' failed with exit status {status}")
        self.reporter.status(f"{self.profile.name}: {self.context.settings.daemon} {verb}")

    def _install_target(self) -> str:
        if self.config.install == AUTO:
            return on_root(self.context.root, self.profile.service_file_path)
        return self.config.install

    def _template_path(self) -> Path:
        return self.context.settings.resolve_template_dir() / self.profile.template_name

    def _read_template(self, template_path: Path) -> str:
        try:
            with open(template_path, "r") as f:
                return f.read()
        except OSError as e:
            raise ActionError(f"cannot read template {template_path}: {e.strerror or e}")
