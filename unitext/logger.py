import os, sys, logging
from typing import Optional
from functools import partial

FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.enabled = logging_enabled
        # Library modules log under the package root, so configure that once
        root = logging.getLogger(name.split('.')[0])
        if logging_enabled and not root.handlers:
            if log_file == "-":
                handler = logging.StreamHandler(sys.stdout)
            else:
                if log_file is None:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'unitext_debug.log')
                handler = logging.FileHandler(log_file, encoding='utf-8')
            handler.setFormatter(logging.Formatter(FORMAT))
            root.addHandler(handler)
            root.setLevel(logging.DEBUG)
        elif not logging_enabled:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
