from .config import dotdict, PipeOptions, load_options, dump_options
from .report import report
