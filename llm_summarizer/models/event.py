from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LambdaEvent(BaseModel):
    """Payload sent by the Step Functions orchestrator in event-invocation mode."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    input_dir: str = ""
    output_dir: str = ""
    execution_run_id: str = ""
    compute_node_id: str = ""
    session_token: str = ""
    refresh_token: str = ""
