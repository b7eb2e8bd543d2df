from django.http import JsonResponse


def health_check(request):
    """Report that the service is up."""
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'msg': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'msg': 'Server Error',
        'status': 500
    }, status=500)
