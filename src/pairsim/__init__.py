__version__ = '0.1.0'

from .session import ScanSession
from .commands.compare import ComparisonDriver, ComparisonError, ComparisonOutcome, compare_files
from .commands.render import TableLayout, render_table
from .report.scored_pair import ScoredPair, pair_key
from .report.store import PairStore, rank
from .utils.normalizer import normalize_file, normalize_text
from .utils.selection import FileSelection
from .utils.walker import discover_files
