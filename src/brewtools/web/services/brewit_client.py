"""Brewit automation API client.

Wraps send/swap parameters in an automation job envelope and posts it to
the Monad agent endpoint. The response body is opaque to this layer and is
returned as parsed JSON.

Errors are not handled here: transport failures and non-2xx statuses raise
httpx exceptions for the caller to map.
"""

import logging
from typing import Any, Optional, Union

import httpx

from brewtools.config import Settings, get_settings
from brewtools.web.contracts.tools import AutomationJob, SendParams, SwapParams

logger = logging.getLogger(__name__)


class BrewitClient:
    """HTTP client for the Brewit automation agent."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize client.

        Args:
            settings: Settings to use (defaults to the cached application settings)
            transport: Optional httpx transport, used by tests
        """
        self.settings = settings or get_settings()
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.brewit_timeout,
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def build_job(self, task: str, params: Union[SendParams, SwapParams]) -> AutomationJob:
        """Wrap tool parameters in the automation job envelope."""
        return AutomationJob(
            name=self.settings.job_name,
            repeat=self.settings.job_repeat,
            times=self.settings.job_times,
            task=task,
            payload=params,
            enabled=True,
        )

    async def send(self, params: SendParams) -> Any:
        """Submit a send job."""
        return await self._submit(self.build_job("send", params))

    async def swap(self, params: SwapParams) -> Any:
        """Submit a swap job."""
        return await self._submit(self.build_job("swap", params))

    async def _submit(self, job: AutomationJob) -> Any:
        client = await self._get_client()
        url = self.settings.agent_url

        logger.info(f"Submitting {job.task} job for {job.payload.accountAddress}")
        response = await client.post(url, json=job.model_dump(warnings=False))
        response.raise_for_status()

        logger.debug(f"Brewit {job.task} job accepted with status {response.status_code}")
        return response.json()
