# Main.py
""""" Entry point for the RPN Calculator.

   Responsibilities:
   - With arguments: evaluate them as one expression and print the result
   - Without arguments: verify required files in development mode,
     configure logging and start the Qt GUI

"""""
import sys
import logging
from pathlib import Path

from RPNCalc import config_manager as config_manager
from RPNCalc import error as E
from RPNCalc import MathEngine as MathEngine
from RPNCalc.logging_config import configure_logging

logger = logging.getLogger("main")

# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In a bundled .exe the files are embedded and this check is skipped.
    """

    package_dir = PROJECT_ROOT / "RPNCalc"

    REQUIRED = [
        package_dir / "UI.py",
        package_dir / "MathEngine.py",
        package_dir / "Parser.py",
        package_dir / "RPNEngine.py",
        package_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        print("Error: The following files are missing or in the wrong location:", file=sys.stderr)
        for file_name in missing_files:
            print(f"- {file_name}", file=sys.stderr)
        sys.exit(1)


def run_once(problem):
    """Evaluate a single expression from the command line; returns the exit status."""
    decimal_places = config_manager.load_setting_value("decimal_places")
    try:
        print(MathEngine.calculate(problem, decimal_places=decimal_places))
    except E.MathError as e:
        print(f"Error {e.code}: {e.message}", file=sys.stderr)
        return 1
    return 0


def main(argv=None):

    """
    Load configuration and start the GUI.
    - Keep this thin: no business logic here.
    """

    if argv is None:
        argv = sys.argv[1:]

    all_settings = config_manager.load_setting_value("all")
    configure_logging(all_settings["log_level"])

    if argv:
        return run_once(" ".join(argv))

    if not getattr(sys, 'frozen', False):
        logger.debug("Developer Mode: Checking file paths...")
        check_files_exist()

    logger.info("Config loaded: %s", all_settings)

    # The UI owns the event loop; imported late so the CLI path works without a display.
    from RPNCalc import UI as UI
    UI.main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
