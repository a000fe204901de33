import datetime
import logging
import shutil
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def archive_to_history(current_path: Path, history_dir: Path, label: str) -> None:
    """
    Move the previous session's log into the history directory.

    The content is appended under a session header to
    ``{label}_history.log`` and to a per-day ``{label}_{YYYYMMDD}.log``, then
    the current file is truncated.
    """
    if not current_path.exists():
        return

    try:
        content = current_path.read_text(encoding='utf-8').strip()
        if not content:
            return

        now = datetime.datetime.now()
        separator = "=" * 80
        session_header = (
            f"\n\n{separator}\n"
            f"SESSION: {label}\n"
            f"ARCHIVED: {now.strftime(DATE_FORMAT)}\n"
            f"{separator}\n\n"
        )

        for target in (history_dir / f"{label}_history.log", history_dir / f"{label}_{now.strftime('%Y%m%d')}.log"):
            with open(target, 'a', encoding='utf-8') as f:
                f.write(session_header)
                f.write(content)
                f.write("\n")

        current_path.write_text('', encoding='utf-8')
    except OSError as e:
        print(f"Failed to archive {current_path}: {e}", file=sys.stderr)
        backup_path = current_path.with_suffix('.log.bak')
        try:
            shutil.copy2(current_path, backup_path)
        except OSError:
            print(f"Failed to back up {current_path}", file=sys.stderr)


def setup_logging(service_name: str, log_dir: Union[str, Path] = 'logs', level: Union[str, int] = logging.INFO) -> logging.Logger:
    """
    Configure logging for a service.

    Layout:
        {log_dir}/{service_name}.log      - current session of the service
        {log_dir}/all.log                 - current session, all loggers
        {log_dir}/history/                - archives of previous sessions

    The service logger writes to its own file and the console; the root
    logger writes to ``all.log``. Calling this again for the same service
    replaces its handlers instead of duplicating them.

    :param service_name: Name of the service (and of its logger)
    :param log_dir: Directory for the log files
    :param level: Logging level
    :return: The service logger
    """
    logs_dir = Path(log_dir)
    history_dir = logs_dir / 'history'
    history_dir.mkdir(parents=True, exist_ok=True)

    current_log_path = logs_dir / f'{service_name}.log'
    current_all_log_path = logs_dir / 'all.log'

    archive_to_history(current_log_path, history_dir, service_name)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    service_handler = RotatingFileHandler(
        str(current_log_path),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    service_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(service_handler)
    logger.addHandler(console_handler)

    root_logger = logging.getLogger()
    all_log = str(current_all_log_path.resolve())
    if not any(isinstance(h, RotatingFileHandler) and h.baseFilename == all_log for h in root_logger.handlers):
        archive_to_history(current_all_log_path, history_dir, 'all')
        all_handler = RotatingFileHandler(
            all_log,
            maxBytes=20*1024*1024,  # 20 MB
            backupCount=5,
            encoding='utf-8'
        )
        all_handler.setFormatter(formatter)
        root_logger.addHandler(all_handler)
    root_logger.setLevel(level)

    return logger
