"""
Validators
Contract of a validator set selected by identity
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from sanic import Request
from larasanic_jsonapi.http.requests import RequestInterpreter


class Validators(ABC):
    """
    Validator set for one or more resource types

    Registered under an identity and applied by the json-api.validate
    route middleware.
    """

    @abstractmethod
    async def validate(
        self,
        request: Request,
        interpreter: RequestInterpreter,
        document: Optional[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Args:
            document: Decoded request body, None when the body is empty

        Returns:
            JSON:API error objects; an empty list when the document is valid
        """
        pass
