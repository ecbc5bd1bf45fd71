"""
Service context for log lines.

Identifies which process wrote a log line when several API or scheduler
replicas share one log collector.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'call-reservation')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container runtimes set HOSTNAME to the (short) container id
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
