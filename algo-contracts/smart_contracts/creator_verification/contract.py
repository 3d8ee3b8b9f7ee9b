# smart_contracts/creator_verification/contract.py

from algopy import (
    Account,
    ARC4Contract,
    BoxMap,
    Global,
    GlobalState,
    String,
    Txn,
    arc4,
)

# Status codes returned by the ABI methods. They match the error codes the
# off-chain registry reports, so clients can share one table.
OK = 0
ERR_NOT_ADMIN_REGISTER = 100
ERR_CONTENT_NOT_FOUND = 101
ERR_NOT_OWNER = 102
ERR_VERIFICATION_FAILED = 104
ERR_NOT_ADMIN_SET_ADMIN = 105


class CreatorVerification(ARC4Contract):
    """
    A smart contract recording who currently owns a piece of content.
    The admin registers content ids, owners hand them on, and anyone can
    check a claimed creator against the stored owner.
    Owners live in Box storage keyed by content id; the admin lives in global state.
    """

    def __init__(self) -> None:
        self.admin = GlobalState(Account, key="admin")
        self.content_creators = BoxMap(String, Account, key_prefix=b"c_")

    @arc4.abimethod(create="require")
    def create(self) -> None:
        """Seeds the admin with the account that deploys the application."""
        self.admin.value = Txn.sender

    @arc4.abimethod
    def register_content(self, content_id: String) -> arc4.UInt64:
        """
        Registers a content id under the admin, replacing any previous owner.
        Args:
            content_id: The identifier of the content.
        Returns:
            0 on success, 100 if the sender is not the admin.
        """
        if Txn.sender != self.admin.value:
            return arc4.UInt64(ERR_NOT_ADMIN_REGISTER)

        self.content_creators[content_id] = Txn.sender
        return arc4.UInt64(OK)

    @arc4.abimethod
    def transfer_content(self, content_id: String, new_owner: arc4.Address) -> arc4.UInt64:
        """
        Transfers ownership of a content id to a new address.
        This can only be called by the current owner of the content.
        Args:
            content_id: The identifier of the content to transfer.
            new_owner: The Algorand address of the new owner. Any address is accepted,
                including the zero address, which nobody can send from.
        Returns:
            0 on success, 101 if the content is unknown, 102 if the sender is not its owner.
        """
        current_owner, exists = self.content_creators.maybe(content_id)
        if not exists:
            return arc4.UInt64(ERR_CONTENT_NOT_FOUND)

        if current_owner != Txn.sender:
            return arc4.UInt64(ERR_NOT_OWNER)

        self.content_creators[content_id] = new_owner.native
        return arc4.UInt64(OK)

    @arc4.abimethod(readonly=True)
    def verify_creator(self, content_id: String, creator: arc4.Address) -> arc4.UInt64:
        """
        Checks whether `creator` is the current owner of a content id.
        Returns:
            0 when it is, 104 when the content is unknown or owned by someone else.
        """
        owner, exists = self.content_creators.maybe(content_id)
        if exists and owner == creator.native:
            return arc4.UInt64(OK)
        return arc4.UInt64(ERR_VERIFICATION_FAILED)

    @arc4.abimethod
    def set_admin(self, new_admin: arc4.Address) -> arc4.UInt64:
        """
        Hands the admin role to another address. Only the current admin may call it.
        Returns:
            0 on success, 105 if the sender is not the admin.
        """
        if Txn.sender != self.admin.value:
            return arc4.UInt64(ERR_NOT_ADMIN_SET_ADMIN)

        self.admin.value = new_admin.native
        return arc4.UInt64(OK)

    @arc4.abimethod(readonly=True)
    def get_admin(self) -> arc4.Address:
        return arc4.Address(self.admin.value)

    @arc4.abimethod(readonly=True)
    def get_content_creator(self, content_id: String) -> arc4.Address:
        """
        Returns the owner of a content id, or the zero address if it was never registered.
        Content transferred to the zero address reads the same here; transfer_content
        still tells them apart (102 for a zero-owned id, 101 for an unknown one).
        """
        owner, exists = self.content_creators.maybe(content_id)
        if exists:
            return arc4.Address(owner)
        return arc4.Address(Global.zero_address)
