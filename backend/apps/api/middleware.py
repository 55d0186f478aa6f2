from django.utils.deprecation import MiddlewareMixin
from rest_framework.renderers import JSONRenderer
from apps.api.validation import validate_request_context
from apps.common import get_logger

logger = get_logger(__name__).bind(component='api', layer='middleware')


class RequestValidationMiddleware(MiddlewareMixin):
    """
    Parses and validates query strings and bodies for the views that need it
    before the view layer runs. Parsed values are attached to the request.
    """

    def process_view(self, request, view_func, view_args, view_kwargs):
        view_class = getattr(view_func, 'view_class', None)
        if not view_class:
            return None
        view_name = getattr(view_class, '__name__', str(view_class))
        logger.debug('Validating request context', view=view_name, method=getattr(request, 'method', None))
        response = validate_request_context(request, view_class, view_kwargs)
        if response is not None:
            logger.info(
                'Request blocked by validation',
                view=view_name,
                method=getattr(request, 'method', None),
                status=getattr(response, 'status_code', None),
            )
            # Responses returned here never pass through APIView.finalize_response.
            response.accepted_renderer = JSONRenderer()
            response.accepted_media_type = 'application/json'
            response.renderer_context = {'request': request, 'response': response}
        return response
