"""Program entry point and command loop."""

import logging

from diet_book.app_logging import configure_logging
from diet_book.config import Settings
from diet_book.containers import AppContainer, build_container
from diet_book.errors import DietBookError
from diet_book.services.commands import ExitCommand

_logger = logging.getLogger(__name__)


def run(container: AppContainer) -> None:
    """Restore saved data, then execute commands until exit or end of input."""
    ui = container.ui
    manager = container.session_manager
    status = manager.load(ui)
    ui.print_greeting(status, manager.person.name)

    while not manager.is_exit:
        line = ui.get_command()
        try:
            command = ExitCommand() if line is None else manager.manage(line)
            command.execute(manager, ui)
        except DietBookError as exc:
            ui.print_error_message(str(exc))
        except Exception:
            _logger.exception("Command failed: %r", line)
            ui.print_error_message("Oops something went wrong!")
        if line is None:
            break


def main() -> None:
    """Run DietBook against the configured data files."""
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format, settings.log_file)
    run(build_container(settings))


if __name__ == "__main__":
    main()
