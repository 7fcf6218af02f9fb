# Terraform shortcuts: environment-aware init/plan/apply/destroy, fmt, unlock
#
# Environment files live in one directory (default `environments/`):
#   - <env>.tfbackend for init
#   - <env>.tfvars for plan/apply/destroy
#
# --auto-approve is never passed; terraform's own confirmation prompt stays.

from typing import List, Optional

from ..errors import CommandError, PreconditionError, UsageError
from ..infra.config import DEFAULT_TERRAFORM_ENV_DIR
from ..infra.logger import COLOR_ERROR, COLOR_INFO, COLOR_WARNING, banner
from ..infra.process import COMMAND_NOT_FOUND, run_command

OPERATIONS = ("init", "plan", "apply", "destroy")
PROTECTED_ENVIRONMENTS = ("prod",)


def build_command(operation: str, env: Optional[str] = None,
                  env_dir: str = DEFAULT_TERRAFORM_ENV_DIR) -> List[str]:
    """Build the terraform argv for one operation.

    Args:
        operation: init, plan, apply or destroy
        env: environment name (dev, prod, ...); None runs the bare command
        env_dir: directory holding the .tfbackend / .tfvars files

    Returns:
        command list
    """
    if operation not in OPERATIONS:
        raise UsageError(f"unknown terraform operation: {operation}")

    cmd = ["terraform", operation]
    if env:
        if operation == "init":
            cmd.append(f"-backend-config={env_dir}/{env}.tfbackend")
        else:
            cmd.append(f"-var-file={env_dir}/{env}.tfvars")
    return cmd


def _banner_for(operation: str, env: Optional[str]) -> Optional[str]:
    if operation == "init" or not env:
        return None
    label = env.upper()
    if operation == "plan":
        return f"--- Planning {label} Environment ---"
    if operation == "apply":
        if env in PROTECTED_ENVIRONMENTS:
            return f"*** Applying {label} Environment *** CAUTION! ***"
        return f"--- Applying {label} Environment ---"
    return f"*** DESTROYING {label} ENVIRONMENT *** ARE YOU SURE? ***"


def _run(cmd: List[str]) -> None:
    result = run_command(cmd, capture=False)
    if result.returncode == COMMAND_NOT_FOUND:
        raise PreconditionError("required command 'terraform' not found on PATH")
    if not result.ok:
        raise CommandError(f"'{' '.join(cmd[:2])}' exited with code {result.returncode}")


def run_operation(operation: str, env: Optional[str] = None,
                  env_dir: str = DEFAULT_TERRAFORM_ENV_DIR) -> None:
    if operation == "destroy":
        if not env:
            raise UsageError("destroy needs an explicit environment", usage="tf destroy --env dev")
        if env in PROTECTED_ENVIRONMENTS:
            raise UsageError(f"refusing to destroy the '{env}' environment from a shortcut")

    cmd = build_command(operation, env, env_dir)

    message = _banner_for(operation, env)
    if message:
        dangerous = operation == "destroy" or env in PROTECTED_ENVIRONMENTS
        banner(message, COLOR_ERROR if dangerous else COLOR_INFO)

    _run(cmd)


def fmt() -> None:
    _run(["terraform", "fmt", "--recursive"])


def unlock(lock_id: Optional[str]) -> None:
    if not lock_id or not lock_id.strip():
        raise UsageError(
            "lock ID is required",
            usage=(
                "tf unlock <LOCK_ID>\n"
                "Hint: run 'terraform plan' or 'terraform apply' to see the lock ID if locked."
            ),
        )

    banner(f"Attempting to force-unlock lock ID: {lock_id}", COLOR_WARNING)
    _run(["terraform", "force-unlock", "-force", lock_id])
