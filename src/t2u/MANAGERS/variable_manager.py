"""
Managers for merging template variables from several sources.
"""
import os
from typing import Dict, List
from ..PARSERS.variables_parser import VariablesParser
from ..UTILS.logging_helpers import get_logger

logger = get_logger(__name__)


class VariableManager:
    """
    Manages the merging and resolution of template variables from multiple sources.
    """
    def __init__(self, base_dir: str = "."):
        """
        Initializes the variable manager.

        :param base_dir: The base directory for resolving relative paths to variable files.
        """
        self.base_dir = base_dir
        self.parser = VariablesParser()

    def get_merged_variables(self,
                             explicit: Dict[str, str],
                             files: List[str],
                             include_environ: bool = False) -> Dict[str, str]:
        """
        Merges variables from the process environment, variable files
        and explicit definitions.

        :param explicit: A dictionary of explicitly defined variables.
        :param files: A list of paths to variable files.
        :param include_environ: Start from the current process environment.
        :return: A new dictionary containing the merged variables.
        """
        merged: Dict[str, str] = dict(os.environ) if include_environ else {}

        # 1. Files, later files override earlier ones
        for path in files:
            file_path = os.path.join(self.base_dir, path)
            file_vars = self.parser.parse(file_path)
            logger.debug("Loaded %d variable(s) from %s", len(file_vars), file_path)
            merged.update(file_vars)

        # 2. Explicit variables override everything
        merged.update(explicit)

        return merged
