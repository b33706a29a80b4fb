import datetime
import sys
import time
import traceback
import os
import shutil
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.environ.get(
    "APPCORE_RESOLVER_LOG_DIR",
    os.path.join(os.path.expanduser("~"), ".appcore_resolver", "logs"),
)


def _format_size(bytes_val):
    if bytes_val >= 1024 * 1024 * 1024:
        return f"{bytes_val / (1024*1024*1024):.1f} GB"
    if bytes_val >= 1024 * 1024:
        return f"{bytes_val / (1024*1024):.1f} MB"
    if bytes_val >= 1024:
        return f"{bytes_val / 1024:.1f} KB"
    return f"{int(bytes_val)} B"


class Logger:
    """Console output goes to stderr; stdout is reserved for command data."""

    def __init__(self, log_dir=LOG_DIR, verbose=False):
        self.verbose = verbose
        self.log_file = os.path.join(
            log_dir,
            f"appcore_resolver_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )
        self._file_disabled = False

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _write_file(self, log_message):
        # Created on first write; an unwritable log location only loses the file copy.
        if self._file_disabled:
            return
        try:
            os.makedirs(os.path.dirname(self.log_file), exist_ok=True)
            with open(self.log_file, "a") as f:
                f.write(log_message)
        except OSError:
            self._file_disabled = True

    def _log(self, level, message, color, prefix="", show_timestamp=True, to_file=True, console=True):
        # Looked up per call so redirected streams (click's CliRunner) see the output.
        stream = sys.stderr
        if show_timestamp:
            timestamp = self._get_timestamp()
            log_message = f"[{timestamp}] [{level}] {prefix}{message}\n"
            if console:
                print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=stream)
        else:
            log_message = f"[{level}] {prefix}{message}\n"
            if console:
                print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=stream)

        if to_file:
            self._write_file(log_message)

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def notice(self, message):
        """Console-only info line, for code paths that must not write to disk."""
        self._log("INFO", message, Fore.CYAN, to_file=False)

    def step_info(self, message, indent=0):
        prefix = " " * indent
        self._log("", message, Fore.CYAN, prefix=prefix, show_timestamp=False)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        if self.verbose:
            self._log("DEBUG", message, Fore.WHITE + Style.DIM)

    # -------- Progress bar method --------
    def progress(self, chunks, description="Downloading", total=0, bar_length=30):
        """Yield byte chunks unchanged while drawing a download bar.

        Without a known total (no content-length header) the chunks are
        passed through and only the byte count is reported at the end.
        """
        received = 0
        start_time = time.time()
        print(f"{description}...", file=sys.stderr)
        sys.stderr.flush()

        for chunk in chunks:
            yield chunk
            received += len(chunk)
            if not total:
                continue

            elapsed = time.time() - start_time
            percent = min(1.0, received / total)
            filled_len = int(bar_length * percent)

            bar = Fore.GREEN + "━" * filled_len
            if filled_len < bar_length:
                bar += Fore.RED + "╺" + Style.RESET_ALL + "━" * (bar_length - filled_len - 1)
            else:
                bar += Style.RESET_ALL

            speed = received / elapsed if elapsed > 0 else 0
            line = (
                f"{percent*100:3.0f}% | "
                f"{bar} | "
                f"{_format_size(received)}/{_format_size(total)} • "
                f"{speed/(1024*1024):.1f} MB/s • "
                f"{time.strftime('%M:%S', time.gmtime(elapsed))}"
            )
            if shutil.get_terminal_size().columns < len(line):
                sys.stderr.write("\r" + line[:shutil.get_terminal_size().columns - 1])
            else:
                sys.stderr.write("\r" + line)
            sys.stderr.flush()

        print(file=sys.stderr)
        self.step_info(f"Received {_format_size(received)}", indent=2)

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED)


# ---------------- Helper ----------------
logger = Logger()

def get_latest_log_file(log_dir=LOG_DIR):
    """Return the path to the latest log file."""
    if not os.path.isdir(log_dir):
        return None
    log_files = [os.path.join(log_dir, f) for f in os.listdir(log_dir) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
