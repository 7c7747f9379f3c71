"""Import utilities used for input/output, logging, and user interfaces."""

from .logging import console as console
from .logging import log_error as log_error
from .logging import log_info as log_info
from .logging import log_warning as log_warning
from .yaml_utils import load_yaml_data as load_yaml_data
