from django.http import JsonResponse
from django.db import DEFAULT_DB_ALIAS, connections
from django.db.migrations.executor import MigrationExecutor
from django.db.utils import DatabaseError, OperationalError
import time
from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _db_check(alias=DEFAULT_DB_ALIAS):
    started = time.time()
    try:
        conn = connections[alias]
        with conn.cursor() as cursor:
            cursor.execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def _migrations_check(alias=DEFAULT_DB_ALIAS):
    """Report unapplied migrations; the schema must exist before serving traffic."""
    try:
        executor = MigrationExecutor(connections[alias])
        targets = executor.loader.graph.leaf_nodes()
        pending = executor.migration_plan(targets)
    except DatabaseError as e:
        logger.warning('Migration status check failed', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    if pending:
        names = [f'{migration.app_label}.{migration.name}' for migration, _ in pending]
        logger.warning('Unapplied migrations detected', alias=alias, pending=len(names))
        return {'status': 'fail', 'pending': names}
    return {'status': 'ok'}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: database reachable and schema migrated."""
    checks = {'database': _db_check()}
    if checks['database'].get('status') == 'ok':
        checks['migrations'] = _migrations_check()
    else:
        checks['migrations'] = {'status': 'skipped', 'detail': 'database unavailable'}

    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'checks': checks,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)
