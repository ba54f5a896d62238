"""Streamlit UI for browsing job listings."""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from joblist.config import load_settings
from joblist.controller import HomeController, ListingController
from joblist.format import chips_html, format_relative_time, format_salary_range, skill_chips, title_html
from joblist.log import get_logger
from joblist.models import Job, LocationType
from joblist.sources import ListingSourceBase, get_source

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

LOCATION_LABELS: dict[LocationType, str] = {
    LocationType.ANY: "All Locations",
    LocationType.REMOTE: "Remote",
    LocationType.HYBRID: "Hybrid",
    LocationType.ONSITE: "On-site",
}

_CARD_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: #f8f9fb;
}
.match-badge {
    display: inline-block; padding: 0.1rem 0.55rem; margin-left: 0.5rem;
    background: #dcfce7; color: #166534; border: 1px solid #bbf7d0;
    border-radius: 999px; font-size: 0.8rem; font-weight: 600;
}
.skill-chip {
    display: inline-block; padding: 0.1rem 0.5rem; margin: 0 0.25rem 0.25rem 0;
    background: #eef2f7; border-radius: 6px; font-size: 0.8rem;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _source() -> ListingSourceBase:
    if "source" not in st.session_state:
        st.session_state["source"] = get_source(load_settings())
    return st.session_state["source"]


def _run(coro) -> None:
    asyncio.run(coro)


def _meta_line(job: Job) -> str:
    parts = [f"📍 {job.location}"] if job.location else []
    if job.location_type is not None:
        parts.append(LOCATION_LABELS[job.location_type])
    salary = format_salary_range(job.salary_min, job.salary_max)
    if salary:
        parts.append(f"💰 {salary}")
    posted = format_relative_time(job.posted_date)
    if posted:
        parts.append(f"🕒 {posted}")
    return "  ·  ".join(parts)


def _job_card(job: Job, key_prefix: str, on_details=None) -> None:
    with st.container(border=True):
        left, right = st.columns([5, 1])
        with left:
            st.markdown(title_html(job), unsafe_allow_html=True)
            st.markdown(job.company)
            st.caption(_meta_line(job))
            if job.required_skills:
                st.markdown(chips_html(skill_chips(job.required_skills)), unsafe_allow_html=True)
        with right:
            if job.source_url:
                st.link_button("Apply", job.source_url, use_container_width=True)
            if on_details is not None:
                if st.button("Details", key=f"{key_prefix}-{job.id}", use_container_width=True):
                    on_details(job.id)
                    st.rerun()


def _detail_panel(ctl: ListingController, job: Job) -> None:
    with st.container(border=True):
        st.subheader(job.title)
        st.markdown(f"**{job.company}**")
        st.caption(_meta_line(job))

        if job.description:
            st.markdown("#### Description")
            st.text(job.description)

        if job.required_skills:
            st.markdown("#### Required Skills")
            st.markdown(chips_html(job.required_skills), unsafe_allow_html=True)

        c1, c2 = st.columns(2)
        if job.source_url:
            c1.link_button("Apply Now", job.source_url, type="primary", use_container_width=True)
        if c2.button("Close", use_container_width=True):
            ctl.dismiss()
            st.rerun()


# ── Page: Home ───────────────────────────────────────────────────────────


def page_home() -> None:
    home: HomeController | None = st.session_state.get("home")
    if home is None:
        home = HomeController(_source())
        with st.spinner("Loading jobs…"):
            _run(home.load())
        st.session_state["home"] = home

    st.header("Find Your Next Job")
    st.write(f"{home.total:,} opportunities available")

    with st.form("home_search"):
        c1, c2 = st.columns([3, 1])
        text = c1.text_input("Search", placeholder="Job title, keywords, or company", label_visibility="collapsed")
        location = c2.selectbox(
            "Location",
            list(LOCATION_LABELS),
            format_func=LOCATION_LABELS.get,
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button("Search Jobs", type="primary", use_container_width=True)

    if submitted:
        st.session_state["listing_params"] = HomeController.search_params(text, location)
        st.session_state.pop("listing", None)
        st.switch_page(JOBS_PAGE)

    st.divider()
    c1, c2 = st.columns([4, 1])
    c1.subheader("Recommended Jobs")
    if c2.button("View All Jobs", use_container_width=True):
        st.session_state["listing_params"] = {}
        st.session_state.pop("listing", None)
        st.switch_page(JOBS_PAGE)

    if home.error:
        st.warning(f"Could not load recommended jobs: {home.error}")
    if not home.jobs:
        st.info("No jobs available right now. Check back later.")
        return
    for job in home.jobs:
        _job_card(job, "home")


# ── Page: Jobs ───────────────────────────────────────────────────────────


def _listing() -> ListingController:
    ctl: ListingController | None = st.session_state.get("listing")
    if ctl is None:
        params = st.session_state.pop("listing_params", None)
        if params is None:
            params = st.query_params.to_dict()
        ctl = ListingController.from_params(_source(), params)
        with st.spinner("Loading jobs…"):
            _run(ctl.start())
        st.session_state["listing"] = ctl
    return ctl


def page_jobs() -> None:
    ctl = _listing()
    vm = ctl.view_model()

    with st.form("listing_search"):
        c1, c2, c3 = st.columns([4, 2, 1])
        text = c1.text_input(
            "Search", value=vm.search_text, placeholder="Search jobs...", label_visibility="collapsed"
        )
        options = list(LOCATION_LABELS)
        location = c2.selectbox(
            "Location",
            options,
            index=options.index(vm.location_type),
            format_func=LOCATION_LABELS.get,
            label_visibility="collapsed",
        )
        submitted = c3.form_submit_button("Search", type="primary", use_container_width=True)

    if submitted:
        ctl.set_search_text(text)
        ctl.set_location_type(location)
        _run(ctl.search())
        filters = ctl.filters
        st.query_params.from_dict(HomeController.search_params(filters.search_text, filters.location_type))
        st.rerun()

    if vm.error:
        st.warning(f"Failed to load jobs: {vm.error}")
        if st.button("Retry"):
            _run(ctl.reload())
            st.rerun()

    st.caption(f"{vm.total:,} jobs found")

    if vm.status == "empty" or (vm.status != "loading" and not vm.jobs):
        with st.container(border=True):
            st.markdown("### No jobs found")
            st.write("Try adjusting your search criteria")
        return

    list_col, detail_col = st.columns([3, 2]) if vm.selected_job else (st.container(), None)
    with list_col:
        for job in vm.jobs:
            _job_card(job, "list", on_details=ctl.select)

        if vm.total_pages > 1:
            c1, c2, c3 = st.columns([1, 2, 1])
            if c1.button("‹ Previous", disabled=not vm.has_previous, use_container_width=True):
                _run(ctl.previous_page())
                st.rerun()
            c2.markdown(f"<div style='text-align:center'>Page {vm.page} of {vm.total_pages}</div>", unsafe_allow_html=True)
            if c3.button("Next ›", disabled=not vm.has_next, use_container_width=True):
                _run(ctl.next_page())
                st.rerun()

    if detail_col is not None:
        with detail_col:
            _detail_panel(ctl, vm.selected_job)


# ── Main ─────────────────────────────────────────────────────────────────


def _wrap_home():
    st.markdown(_CARD_CSS, unsafe_allow_html=True)
    page_home()


def _wrap_jobs():
    st.markdown(_CARD_CSS, unsafe_allow_html=True)
    page_jobs()


HOME_PAGE = st.Page(_wrap_home, title="Home", icon="🏠", url_path="home", default=True)
JOBS_PAGE = st.Page(_wrap_jobs, title="Jobs", icon="💼", url_path="jobs")

nav = st.navigation([HOME_PAGE, JOBS_PAGE])
nav.run()
