# smart_contracts/creator_verification/deploy_config.py

import logging

import algokit_utils
from dotenv import load_dotenv

from creator_registry.errors import ErrorKind

logger = logging.getLogger(__name__)

# Status codes returned by the contract share the registry's wire codes.
STATUS_NAMES = {0: "ok", **{kind.code: kind.label for kind in ErrorKind}}


def deploy(algorand: algokit_utils.AlgorandClient):
    """
    Deploys the CreatorVerification smart contract application to the Algorand network.
    The deployer becomes the first admin.
    Args:
        algorand: An AlgorandClient instance configured for the target network.
    Returns:
        A typed client for the deployed contract.
    """
    # Generated by AlgoKit when the contract is compiled.
    from smart_contracts.artifacts.creator_verification.creator_verification_client import (
        CreatorVerificationFactory,
        CreatorVerificationMethodCallCreateParams,
    )

    deployer = algorand.account.from_environment("DEPLOYER")
    logger.info(f"Using deployer account: {deployer.address}")

    factory = algorand.client.get_typed_app_factory(
        CreatorVerificationFactory, default_sender=deployer.address
    )

    # AppendApp keeps existing content records: a changed program is deployed
    # as a new app instead of replacing the live one.
    app_client, result = factory.deploy(
        on_update=algokit_utils.OnUpdate.AppendApp,
        on_schema_break=algokit_utils.OnSchemaBreak.AppendApp,
        create_params=CreatorVerificationMethodCallCreateParams(method="create()void"),
    )
    logger.info(
        f"App deployment result: {result.operation_performed} "
        f"for app with ID: {app_client.app_id}"
    )

    # Box storage needs the app account to hold a minimum balance.
    if result.operation_performed in [
        algokit_utils.OperationPerformed.Create,
        algokit_utils.OperationPerformed.Replace,
    ]:
        algorand.send.payment(
            algokit_utils.PaymentParams(
                amount=algokit_utils.AlgoAmount.from_algo(1),
                sender=deployer.address,
                receiver=app_client.app_address,
            )
        )
        logger.info(f"Funded app {app_client.app_id} with 1 Algo.")

    return app_client


def _status(response) -> str:
    code = int(response.abi_return)
    return STATUS_NAMES.get(code, str(code))


def run_examples(algorand: algokit_utils.AlgorandClient, app_client):
    """
    Walks a content id through a chain of owners on the deployed contract:
    admin -> user1 -> user2 -> user3 -> user1, then checks who verifies.
    Args:
        algorand: The AlgorandClient used for deployment.
        app_client: A typed client for the deployed contract.
    """
    deployer = algorand.account.from_environment("DEPLOYER")
    users = [algorand.account.random() for _ in range(3)]
    for user in users:
        algorand.account.ensure_funded(
            account_to_fund=user.address,
            dispenser_account=deployer.address,
            min_spending_balance=algokit_utils.AlgoAmount.from_algo(1),
        )

    content_id = "content-123"

    logger.info(f"--- Registering content: {content_id} ---")
    response = app_client.send.register_content(args=(content_id,))
    logger.info(f"register_content: {_status(response)} (txn {response.tx_ids[0]})")

    chain = [deployer, *users, users[0]]
    for current, new_owner in zip(chain, chain[1:]):
        response = app_client.send.transfer_content(
            args=(content_id, new_owner.address),
            params=algokit_utils.CommonAppCallParams(sender=current.address),
        )
        logger.info(f"transfer {current.address} -> {new_owner.address}: {_status(response)}")

    for candidate in [deployer, *users]:
        response = app_client.send.verify_creator(args=(content_id, candidate.address))
        logger.info(f"verify_creator({candidate.address}): {_status(response)}")


def main():
    """Main function to run deployment and examples."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    algorand = algokit_utils.AlgorandClient.from_environment()
    app_client = deploy(algorand)
    run_examples(algorand, app_client)


if __name__ == "__main__":
    main()
