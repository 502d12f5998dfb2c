"""Streamlit dashboard entry point."""

from collections.abc import Callable, Sequence

import altair as alt
import streamlit as st

from worth_tracker.application.use_cases.manage_items import ItemService
from worth_tracker.application.use_cases.manage_users import UserService
from worth_tracker.domain.constants import ITEM_TYPES
from worth_tracker.domain.errors import WorthTrackerError
from worth_tracker.domain.models import ItemDTO, ItemReport
from worth_tracker.infrastructure.container import build_services
from worth_tracker.infrastructure.logging.logger import get_usage_logger


BALANCE_PALETTE = ["#2e7d32", "#e76f51"]


def _build_services() -> tuple[UserService, ItemService]:
    """Bootstrap the schema and wire the services."""
    return build_services()


@st.cache_resource(show_spinner=False)
def _load_services() -> tuple[UserService, ItemService]:
    """Cached wrapper around _build_services for Streamlit sessions."""
    return _build_services()


def _format_amount(value: int) -> str:
    """Format integer amounts with thousands separators."""
    return f"{value:,}"


def _item_label(item: ItemDTO) -> str:
    return f"#{item.id} {item.name} ({item.item_type})"


def _item_rows(items: Sequence[ItemDTO]) -> list[dict[str, str | int]]:
    """Build table rows for the items dataframe."""
    return [
        {
            "ID": item.id,
            "Name": item.name,
            "Type": item.item_type,
            "Value": item.value,
        }
        for item in items
    ]


def _prepare_balance_chart_data(
    report: ItemReport,
) -> list[dict[str, str | int]]:
    """Prepare donut chart data for assets versus liabilities.

    Args:
        report: Item report of the selected user.

    Returns:
        Altair-ready rows; categories with a zero total are left out.
    """
    total = report.asset_total + report.liability_total
    data: list[dict[str, str | int]] = []
    for category, amount in (
        ("Assets", report.asset_total),
        ("Liabilities", report.liability_total),
    ):
        if amount == 0:
            continue
        share = amount * 100 / total
        data.append(
            {
                "category": category,
                "amount": amount,
                "amount_label": _format_amount(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _run_action(
    action: str,
    operation: Callable[..., None],
    *args,
) -> str | None:
    """Run a core operation and record it on the usage logger.

    Args:
        action: Short name of the action for the usage log.
        operation: Core operation to call.
        *args: Positional arguments for the operation.

    Returns:
        str | None: Error message when the core rejected the request.
    """
    usage_logger = get_usage_logger()
    try:
        operation(*args)
    except WorthTrackerError as exc:
        usage_logger.warning(f"{action} rejected: {exc}")
        return str(exc)
    usage_logger.info(f"{action} succeeded")
    return None


def _apply_result(error: str | None) -> None:
    """Show the error, or rerun the script so the data reloads."""
    if error:
        st.error(error)
        return
    st.rerun()


def _render_summary(report: ItemReport) -> None:
    """Render the Assets, Liabilities and Net Worth metrics."""
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric("Assets", _format_amount(report.asset_total))
    liabilities_col.metric(
        "Liabilities",
        _format_amount(report.liability_total),
    )
    net_worth_col.metric("Net Worth", _format_amount(report.net_worth))


def _render_items(report: ItemReport) -> None:
    """Render the items table of the selected user."""
    st.subheader(f"Items of {report.username}")
    if not report.items:
        st.info("No items yet. Add one from the sidebar.")
        return
    st.caption(f"{len(report.items)} items")
    st.dataframe(_item_rows(report.items), width="stretch", hide_index=True)


def _render_balance_chart(report: ItemReport) -> None:
    """Render a donut chart of assets versus liabilities."""
    data = _prepare_balance_chart_data(report)
    if not data:
        st.info("No amounts available for the chart.")
        return

    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=90,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=["Assets", "Liabilities"],
                range=BALANCE_PALETTE,
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.properties(width=300, height=300).configure_view(
        stroke=None
    )
    st.subheader("Assets vs Liabilities")
    st.altair_chart(chart, width="stretch")


def _render_add_user_form(user_service: UserService) -> None:
    """Render the sidebar form creating a user."""
    with st.sidebar.form("add_user", clear_on_submit=True):
        name = st.text_input("New user name")
        submitted = st.form_submit_button("Add user")
    if submitted:
        _apply_result(_run_action("add_user", user_service.add_user, name))


def _render_item_forms(item_service: ItemService, report: ItemReport) -> None:
    """Render the sidebar forms adding, updating and deleting items."""
    with st.sidebar.form("add_item", clear_on_submit=True):
        st.markdown("**Add item**")
        name = st.text_input("Name", key="add_item_name")
        item_type = st.selectbox("Type", ITEM_TYPES, key="add_item_type")
        value = st.number_input(
            "Value",
            min_value=0,
            step=1,
            key="add_item_value",
        )
        submitted = st.form_submit_button("Add item")
    if submitted:
        _apply_result(
            _run_action(
                "add_item",
                item_service.add_item,
                name,
                item_type,
                report.username,
                int(value),
            )
        )

    if not report.items:
        return

    selected = st.sidebar.selectbox(
        "Item to edit",
        report.items,
        format_func=_item_label,
    )
    with st.sidebar.form("update_item"):
        st.markdown("**Update item**")
        new_name = st.text_input(
            "Name",
            value=selected.name,
            key=f"update_item_name_{selected.id}",
        )
        new_type = st.selectbox(
            "Type",
            ITEM_TYPES,
            index=ITEM_TYPES.index(selected.item_type)
            if selected.item_type in ITEM_TYPES
            else 0,
            key=f"update_item_type_{selected.id}",
        )
        new_value = st.number_input(
            "Value",
            min_value=0,
            step=1,
            value=selected.value,
            key=f"update_item_value_{selected.id}",
        )
        update_clicked = st.form_submit_button("Save changes")
        delete_clicked = st.form_submit_button("Delete item")
    if update_clicked:
        _apply_result(
            _run_action(
                "update_item",
                item_service.update_item,
                selected.id,
                new_name,
                new_type,
                report.username,
                int(new_value),
            )
        )
    elif delete_clicked:
        _apply_result(
            _run_action("delete_item", item_service.delete_item, selected.id)
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Worth Tracker", layout="wide")
    st.title("Worth Tracker")

    try:
        user_service, item_service = _load_services()
    except WorthTrackerError as exc:
        st.error(f"Storage is unavailable: {exc}")
        return

    _render_add_user_form(user_service)

    try:
        users = user_service.list_users()
        if not users:
            st.warning("No users yet. Add one from the sidebar to start.")
            return
        username = st.sidebar.selectbox(
            "User",
            [user.name for user in users],
        )
        report = item_service.list_items(username)
    except WorthTrackerError as exc:
        st.error(str(exc))
        return

    _render_summary(report)
    items_col, chart_col = st.columns(2)
    with items_col:
        _render_items(report)
    with chart_col:
        _render_balance_chart(report)
    _render_item_forms(item_service, report)


if __name__ == "__main__":  # pragma: no cover
    main()
