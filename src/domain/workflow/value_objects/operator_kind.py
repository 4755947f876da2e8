import random

OPERATOR_KINDS: tuple[str, ...] = (
    "PythonOperator",
    "BashOperator",
    "PostgresOperator",
    "MySqlOperator",
    "HttpSensor",
    "S3KeySensor",
    "EmailOperator",
    "SlackOperator",
    "SparkSubmitOperator",
    "DockerOperator",
)


def draw_operator(rng: random.Random) -> str:
    return OPERATOR_KINDS[rng.randrange(len(OPERATOR_KINDS))]


def operator_label(operator: str) -> str:
    """Short label used in task names, e.g. ``BashOperator`` -> ``Bash``."""
    return operator.replace("Operator", "")
