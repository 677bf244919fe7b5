import time

from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

from automata.backend.regex_engine.engine import RegexEngine
from automata.backend.regex_engine.errors import RegexEngineError


def _compile(request):
    """
    Returns (engine, None) on success or (None, JsonResponse) describing
    why the pattern could not be compiled.
    """
    pattern = request.GET.get("pattern")
    if pattern is None:
        return None, JsonResponse({"error": "Missing 'pattern' parameter", "index": None}, status=400)

    raw = request.GET.get("strict")
    # absent means "use REGEX_ENGINE['STRICT']"; an explicit 0 turns it off
    strict = None if raw is None else raw.lower() in ("1", "true", "yes")

    try:
        return RegexEngine(pattern, strict=strict), None
    except RegexEngineError as exc:
        return None, JsonResponse(
            {"error": str(exc), "index": getattr(exc, "index", None)},
            status=400,
        )


@require_GET
def compile_api(request):
    """
    GET /api/compile?pattern=...&strict=1
    Parse tree, NFA states/transitions and size stats as JSON.
    """
    start = time.time()

    engine, error = _compile(request)
    if error is not None:
        return error

    data = engine.as_dict()
    data["elapsed_ms"] = (time.time() - start) * 1000.0
    return JsonResponse(data)


@require_GET
def dot_api(request):
    engine, error = _compile(request)
    if error is not None:
        return error
    return HttpResponse(engine.dot(), content_type="text/vnd.graphviz")
