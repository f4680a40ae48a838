"""
Per-document Basic Authentication decision for Swagger descriptor requests.

``DocAuthFilter.evaluate`` is framework-agnostic: it takes a request path and
the raw ``Authorization`` header and returns ``Forward`` or ``Reject``. The
Starlette middleware in ``swagger_auth.api.middleware.doc_auth`` adapts it to
the request pipeline.
"""

import logging

from swagger_auth.core.configuration import KEY_DELIMITER, ConfigurationReader
from swagger_auth.core.credentials import (
    CredentialsRejected,
    credentials_match,
    parse_basic_authorization,
)
from swagger_auth.core.models import (
    AuthDecision,
    DocumentCredentials,
    Forward,
    Reject,
    SwaggerAuthOptions,
)

logger = logging.getLogger(__name__)

SWAGGER_SEGMENT = "/swagger/"
DESCRIPTOR_SUFFIX = "/swagger.json"

DEFAULT_ERROR_MESSAGE = (
    "Unauthorized access to {document} API documentation. Please provide valid credentials."
)


def extract_document_name(path: str | None) -> str | None:
    """Return the document name in ``/swagger/<name>/swagger.json``.

    The path is lower-cased first. ``None`` when the path is not a descriptor
    request or the name between the two markers is empty.
    """
    if not path:
        return None
    path = path.lower()
    if SWAGGER_SEGMENT not in path or DESCRIPTOR_SUFFIX not in path:
        return None

    start = path.index(SWAGGER_SEGMENT) + len(SWAGGER_SEGMENT)
    end = path.index(DESCRIPTOR_SUFFIX)
    if start > 0 and end > start:
        return path[start:end]
    return None


class DocAuthFilter:
    """Decide whether a documentation request may proceed.

    Documents are open unless both ``{section}:{doc}:Username`` and
    ``{section}:{doc}:Password`` are configured. Configuration is read on every
    call; the filter itself keeps no per-request state.
    """

    def __init__(
        self,
        configuration: ConfigurationReader,
        options: SwaggerAuthOptions | None = None,
    ) -> None:
        self.configuration = configuration
        self.options = options or SwaggerAuthOptions()
        if self.options.require_auth_for_all_documents:
            logger.warning(
                "require_auth_for_all_documents is set but not enforced; "
                "only documents with configured credentials are protected"
            )

    def _key(self, document_name: str, field: str) -> str:
        return KEY_DELIMITER.join((self.options.configuration_section, document_name, field))

    def get_document_credentials(self, document_name: str) -> DocumentCredentials | None:
        """Configured credentials for ``document_name``, or ``None`` if incomplete."""
        username = self.configuration.get(self._key(document_name, "Username"))
        password = self.configuration.get(self._key(document_name, "Password"))
        if not username or not password:
            return None
        return DocumentCredentials(username=username, password=password)

    def is_document_configured(self, document_name: str) -> bool:
        return self.get_document_credentials(document_name) is not None

    def is_authorized(self, document_name: str, authorization: str | None) -> bool:
        """Check a raw ``Authorization`` header against the document's credentials."""
        expected = self.get_document_credentials(document_name)
        if expected is None:
            return True
        result = parse_basic_authorization(authorization)
        if isinstance(result, CredentialsRejected):
            return False
        return credentials_match(result.credentials, expected)

    def rejection_message(self, document_name: str) -> str:
        template = self.options.custom_error_message or DEFAULT_ERROR_MESSAGE
        return template.replace("{document}", document_name)

    def evaluate(self, path: str | None, authorization: str | None) -> AuthDecision:
        """Run the full check for one request.

        Args:
            path: Request path as received.
            authorization: Value of the ``Authorization`` header, if any.

        Returns:
            ``Forward`` to continue the pipeline or ``Reject`` to answer 401.
        """
        document_name = extract_document_name(path)
        if document_name is None:
            return Forward()

        expected = self.get_document_credentials(document_name)
        if expected is None:
            logger.debug("Documentation %s has no credentials configured", document_name)
            return Forward(document_name=document_name)

        result = parse_basic_authorization(authorization)
        if isinstance(result, CredentialsRejected):
            reason = result.reason
        elif credentials_match(result.credentials, expected):
            logger.debug("Authorized access to %s documentation", document_name)
            return Forward(document_name=document_name)
        else:
            reason = "mismatch"

        logger.info("Rejected access to %s documentation (%s)", document_name, reason)
        return Reject(
            document_name=document_name,
            message=self.rejection_message(document_name),
            reason=reason,
        )
