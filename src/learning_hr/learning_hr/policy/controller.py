from __future__ import annotations

from flask import Flask

from ..common.auth import current_role, login_required, roles_required
from ..common.http import json_body, ok
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/policy", methods=["GET"], endpoint="policy_get")
    @login_required
    def policy_get():
        return ok(container.policy_service.get_policy())

    @app.route("/api/policy", methods=["PUT"], endpoint="policy_update")
    @roles_required(Role.ADMIN)
    def policy_update():
        data = json_body()
        policy = container.policy_service.update_policy(
            current_role=current_role(),
            work_start_time=data.get("work_start_time", "08:00"),
            work_end_time=data.get("work_end_time", "17:00"),
            late_threshold_minutes=data.get("late_threshold_minutes", 15),
            working_days_per_month=data.get("working_days_per_month", 26),
            allowed_network_addresses=data.get("allowed_network_addresses") or [],
        )
        return ok(policy)

    @app.route("/api/policy/network-addresses", methods=["POST"], endpoint="policy_add_network_address")
    @roles_required(Role.ADMIN)
    def policy_add_network_address():
        # Without an explicit address, whitelist the network the admin is on now.
        address = json_body().get("address") or container.network.current_address()
        policy = container.policy_service.add_network_address(current_role=current_role(), address=str(address))
        return ok(policy, 201)
