"""Base class for all conversion steps.

Every step declares typed Input, Output, Config via Pydantic models.
Steps hold no per-call state, so one instance is shared by all the
conversions running concurrently inside a chunk.
"""

from __future__ import annotations

import time
import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, ClassVar

from pydantic import BaseModel

from .errors import Vid2PdfError

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)
ConfigT = TypeVar("ConfigT", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseStep(ABC, Generic[InputT, OutputT, ConfigT]):
    """Abstract base for conversion steps.

    Subclasses must:
    1. Define concrete Pydantic models for InputT, OutputT, ConfigT
    2. Set class variables: input_type, output_type, config_type, error_type
    3. Implement run() and validate_inputs()

    Example:
        class ExtractFramesStep(BaseStep[ExtractFramesInput, ExtractFramesOutput, ExtractFramesConfig]):
            input_type = ExtractFramesInput
            output_type = ExtractFramesOutput
            config_type = ExtractFramesConfig
            error_type = ExtractionError

            def run(self, inputs: ExtractFramesInput) -> ExtractFramesOutput: ...
            def validate_inputs(self, inputs: ExtractFramesInput) -> bool: ...
    """

    name: ClassVar[str] = ""
    input_type: ClassVar[type[BaseModel]]
    output_type: ClassVar[type[BaseModel]]
    config_type: ClassVar[type[BaseModel]]
    error_type: ClassVar[type[Vid2PdfError]] = Vid2PdfError

    def __init__(self, config: ConfigT | None = None):
        self.config = config if config is not None else self.config_type()

    @abstractmethod
    def run(self, inputs: InputT) -> OutputT:
        """Execute this step. Returns output model."""
        ...

    @abstractmethod
    def validate_inputs(self, inputs: InputT) -> bool:
        """Check that all required input artifacts exist and are valid."""
        ...

    def execute(self, inputs: InputT) -> OutputT:
        """Run with logging, timing, and validation."""
        step_name = self.name or self.__class__.__name__

        if not self.validate_inputs(inputs):
            raise self.error_type(f"[{step_name}] Input validation failed")

        logger.debug(f"[{step_name}] Starting...")
        t0 = time.time()
        result = self.run(inputs)
        elapsed = time.time() - t0
        logger.debug(f"[{step_name}] Done in {elapsed:.1f}s")
        return result
