"""
logger.py

Logging module for huffcodec.

Stages report what they did through a Logger instance passed in by the
caller. Every record is a Log subclass so callers can filter by type.
"""


from datetime import datetime
from typing import List, Optional, Type, Union

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyAnalysisLog(Log):
    def __init__(self, distinct_symbols: int, total_symbols: int) -> None:
        self.distinct_symbols = distinct_symbols
        self.total_symbols = total_symbols
        super().__init__("Frequency_analysis_log", LogLevel.INFO,
                         f"Distinct symbols: {distinct_symbols}, Total symbols: {total_symbols}")


class TreeConstructionLog(Log):
    def __init__(self, leaf_count: int, depth: int) -> None:
        self.leaf_count = leaf_count
        self.depth = depth
        super().__init__("Tree_construction_log", LogLevel.INFO, f"Leaves: {leaf_count}, Depth: {depth}")


class CodeGenerationLog(Log):
    def __init__(self, code_count: int, max_code_length: int) -> None:
        self.code_count = code_count
        self.max_code_length = max_code_length
        super().__init__("Code_generation_log", LogLevel.INFO,
                         f"Codes: {code_count}, Longest code: {max_code_length}")


class CodingLog(Log):
    def __init__(self, symbol_size: int, encoded_size: int) -> None:
        self.symbol_size = symbol_size
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol size: {symbol_size}, Encoded size: {encoded_size}")


class MetricsLog(Log):
    def __init__(self, entropy: float, compression_ratio: float, efficiency: float) -> None:
        self.entropy = entropy
        self.compression_ratio = compression_ratio
        self.efficiency = efficiency
        super().__init__("Metrics_log", LogLevel.INFO,
                         f"Entropy: {entropy:.4f}, Compression ratio: {compression_ratio:.4f}, Efficiency: {efficiency:.4f}")


class StageErrorLog(Log):
    def __init__(self, stage: str, error: Exception) -> None:
        self.stage = stage
        self.error = error
        super().__init__("Stage_error_log", LogLevel.ERROR, f"Stage {stage} failed: {error}")


class ProgressStep(Log):
    """Base for progress records. The logger numbers them as they arrive."""
    def __init__(self, type_name: str, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__(type_name, LogLevel.PROGRESS, message)


class TreeMergeProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Tree_merge_progress_step", message, total_steps)


class CodingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Coding_progress_step", message, total_steps)


class Logger:
    def __init__(self) -> None:
        self.merge_progress_count = 0
        self.coding_progress_count = 0

        self.logs: List[Log] = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.merge_step_interval_count = 1000
        self.coding_step_interval_count = 100000

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            self._emit(log, self.record_info, self.display_info)
        elif log.level == LogLevel.WARNING:
            self._emit(log, self.record_warning, self.display_warning)
        elif log.level == LogLevel.ERROR:
            self._emit(log, self.record_error, self.display_error)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, TreeMergeProgressStep):
                self.merge_progress_count += 1
                count = self.merge_progress_count
                interval = self.merge_step_interval_count
            elif isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                count = self.coding_progress_count
                interval = self.coding_step_interval_count
            else:
                raise ValueError(f"Unknown progress step: {log.type_name}")
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            self._emit(log, self.record_progress, self.display_progress and count % interval == 0)

    def _emit(self, log: Log, record: bool, display: bool) -> None:
        if record:
            self.logs.append(log)
        if display:
            print(log)

    def get_logs(self, log_type: Optional[Type[Log]] = None) -> List[Log]:
        if log_type is None:
            return list(self.logs)
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear(self) -> None:
        self.logs = []
        self.merge_progress_count = 0
        self.coding_progress_count = 0

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
