"""
MLflow tracing integration for LLM observability.
Provides span-based tracing around completion calls. Disabled unless
MLFLOW_ENABLE_TRACING is set; tracing problems are logged, never raised.
"""
import time
from typing import Optional, Dict, Any
from contextlib import contextmanager

import mlflow

from .config import get_settings
from .log import get_logger

logger = get_logger(__name__)
settings = get_settings()


class MLflowTracer:
    """Handles MLflow tracing for LLM observability."""

    def __init__(self):
        self.enabled = settings.MLFLOW_ENABLE_TRACING
        if self.enabled:
            try:
                mlflow.set_tracking_uri(settings.MLFLOW_TRACKING_URI)
                logger.info("MLflow tracing enabled")
            except Exception as e:
                logger.warning(f"Failed to initialize MLflow tracing: {e}")
                self.enabled = False
        else:
            logger.debug("MLflow tracing disabled")

    @contextmanager
    def span(
        self,
        name: str,
        span_type: str = "UNKNOWN",
        attributes: Optional[Dict[str, Any]] = None,
        inputs: Optional[Dict[str, Any]] = None
    ):
        """
        Create a traced span for an operation.

        Args:
            name: Name of the span (e.g., "analyzer.generate_analysis")
            span_type: Type of span (e.g., "LLM", "CHAIN")
            attributes: Additional metadata for the span
            inputs: Input data to the operation

        Errors raised by the traced block propagate unchanged.
        """
        if not self.enabled:
            yield None
            return

        span_cm = None
        span = None
        try:
            span_cm = mlflow.start_span(name=name, span_type=span_type)
            span = span_cm.__enter__()
        except Exception as e:
            logger.warning(f"Tracing span failed for {name}: {e}")
            span_cm = None
            span = None

        if span is not None:
            try:
                if attributes:
                    span.set_attributes(attributes)
                if inputs:
                    span.set_inputs(inputs)
            except Exception as e:
                logger.warning(f"Failed to set span attributes for {name}: {e}")

        start_time = time.time()
        try:
            yield span
        except BaseException as exc:
            self._close(name, span_cm, exc)
            raise

        if span is not None:
            try:
                elapsed = time.time() - start_time
                span.set_attribute("latency_ms", int(elapsed * 1000))
            except Exception as e:
                logger.warning(f"Failed to record latency for {name}: {e}")
        self._close(name, span_cm, None)

    @staticmethod
    def _close(name: str, span_cm: Any, exc: Optional[BaseException]):
        """Exit the MLflow span; closing errors are logged, the block's own error is never suppressed."""
        if span_cm is None:
            return
        try:
            if exc is None:
                span_cm.__exit__(None, None, None)
            else:
                span_cm.__exit__(type(exc), exc, exc.__traceback__)
        except Exception as e:
            # contextlib spans re-raise the block's error on exit
            if e is exc:
                return
            logger.warning(f"Failed to close tracing span {name}: {e}")

    def trace_llm_call(self, model: str, prompt: str, response: Optional[str]):
        """Log details of an LLM call within the current span."""
        if not self.enabled:
            return

        try:
            attributes = {
                "model": model,
                "prompt_length": len(prompt),
                "response_length": len(response) if response is not None else 0,
            }
            current_span = mlflow.get_current_active_span()
            if current_span:
                current_span.set_attributes(attributes)
        except Exception as e:
            logger.warning(f"Failed to trace LLM call: {e}")


# Global tracer instance
tracer = MLflowTracer()
