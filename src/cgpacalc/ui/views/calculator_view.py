from typing import Dict
import flet as ft

from cgpacalc.config.settings import settings
from cgpacalc.core.gpa import format_credits, format_gpa
from cgpacalc.core.grades import format_points, grade_entries, grade_option_label, performance_tier
from cgpacalc.core.ledger import Course, LedgerChange
from cgpacalc.state.app_state import AppState


TIER_COLORS: Dict[str, str] = {
    "accent": ft.Colors.TEAL_400,
    "primary": ft.Colors.BLUE_400,
    "warning": ft.Colors.AMBER_700,
    "danger": ft.Colors.RED_400,
}


def _summary_tile(value: ft.Text, caption: str) -> ft.Container:
    return ft.Container(
        padding=16,
        expand=True,
        border_radius=8,
        bgcolor=ft.Colors.BLUE_GREY_50,
        content=ft.Column(
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            controls=[value, ft.Text(caption, size=12, color=ft.Colors.GREY_600)],
        ),
    )


def _grade_reference() -> ft.Row:
    return ft.Row(
        wrap=True,
        spacing=10,
        run_spacing=10,
        controls=[
            ft.Container(
                width=72,
                padding=8,
                border_radius=8,
                bgcolor=ft.Colors.BLUE_GREY_50,
                content=ft.Column(
                    spacing=2,
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    controls=[
                        ft.Text(grade, weight=ft.FontWeight.BOLD, color=ft.Colors.BLUE_400),
                        ft.Text(format_points(points), size=12, color=ft.Colors.GREY_600),
                    ],
                ),
            )
            for grade, points in grade_entries()
        ],
    )


def build_calculator_view(page: ft.Page, app_state: AppState) -> ft.View:
    ledger = app_state.ledger

    cgpa_value = ft.Text(size=48, weight=ft.FontWeight.BOLD, color=ft.Colors.WHITE)
    cgpa_label = ft.Text(size=20, color=ft.Colors.WHITE)
    status = ft.Text(color=ft.Colors.GREEN_400)

    eligible_text = ft.Text(size=22, weight=ft.FontWeight.BOLD, color=ft.Colors.BLUE_400)
    credits_text = ft.Text(size=22, weight=ft.FontWeight.BOLD, color=ft.Colors.BLUE_400)
    current_text = ft.Text(size=22, weight=ft.FontWeight.BOLD)

    course_rows = ft.Column(spacing=12)

    def refresh_summary() -> None:
        summary = ledger.summary
        cgpa_value.value = format_gpa(summary.current_average)
        cgpa_label.value = summary.label
        eligible_text.value = str(summary.eligible_count)
        credits_text.value = format_credits(summary.total_credits)
        current_text.value = format_gpa(summary.current_average)
        current_text.color = TIER_COLORS[performance_tier(summary.current_average)]
        status.value = app_state.last_message or ""

    def on_change(change: LedgerChange) -> None:
        app_state.apply(change)
        refresh_summary()
        page.update()

    def build_course_row(course: Course) -> ft.Container:
        name = ft.TextField(
            label="Course Name",
            hint_text="e.g., Mathematics 101",
            value=course.name,
            expand=2,
            on_change=lambda e, cid=course.id: on_change(ledger.update(cid, "name", e.control.value)),
        )
        grade = ft.Dropdown(
            label="Grade",
            hint_text="Select grade",
            value=course.grade or None,
            options=[ft.dropdown.Option(key, grade_option_label(key)) for key, _ in grade_entries()],
            expand=1,
            on_change=lambda e, cid=course.id: on_change(ledger.update(cid, "grade", e.control.value)),
        )
        credits = ft.TextField(
            label="Credit Hours",
            hint_text="3",
            helper_text=f"0 - {format_credits(settings.max_credits_hint)}, "
            f"step {format_credits(settings.credits_step_hint)}",
            value=format_credits(course.credits) if course.credits else "",
            keyboard_type=ft.KeyboardType.NUMBER,
            expand=1,
            on_change=lambda e, cid=course.id: on_change(ledger.update(cid, "credits", e.control.value)),
        )
        delete = ft.IconButton(
            icon=ft.Icons.DELETE,
            icon_color=ft.Colors.RED_400,
            tooltip="Remove course",
            disabled=not ledger.can_remove,
            on_click=lambda _, cid=course.id: on_structure_change(ledger.remove(cid)),
        )

        return ft.Container(
            padding=12,
            border_radius=8,
            border=ft.border.all(1, ft.Colors.BLUE_GREY_100),
            content=ft.Row(
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
                controls=[name, grade, credits, delete],
            ),
        )

    def rebuild_course_rows() -> None:
        course_rows.controls.clear()
        for course in ledger.courses:
            course_rows.controls.append(build_course_row(course))

    def on_structure_change(change: LedgerChange) -> None:
        if change.changed:
            rebuild_course_rows()
        on_change(change)

    rebuild_course_rows()
    refresh_summary()

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(title=ft.Text(settings.title)),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    spacing=20,
                    controls=[
                        ft.Text(
                            "Calculate your Cumulative Grade Point Average. Add your courses, "
                            "grades, and credit hours to get your real-time CGPA.",
                            color=ft.Colors.GREY_700,
                        ),
                        ft.Container(
                            padding=24,
                            border_radius=12,
                            bgcolor=ft.Colors.BLUE_700,
                            content=ft.Column(
                                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                                controls=[
                                    ft.Text("Your CGPA", size=18, color=ft.Colors.WHITE),
                                    cgpa_value,
                                    cgpa_label,
                                    ft.Text("Out of 4.00 scale", size=12, color=ft.Colors.WHITE70),
                                ],
                            ),
                        ),
                        ft.Text("Grade Scale Reference", size=20, weight=ft.FontWeight.BOLD),
                        _grade_reference(),
                        ft.Divider(),
                        ft.Row(
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                            controls=[
                                ft.Text("Course Details", size=20, weight=ft.FontWeight.BOLD),
                                ft.OutlinedButton(
                                    "Add Course",
                                    icon=ft.Icons.ADD,
                                    on_click=lambda _: on_structure_change(ledger.add()),
                                ),
                            ],
                        ),
                        course_rows,
                        status,
                        ft.Divider(),
                        ft.Row(
                            controls=[
                                _summary_tile(eligible_text, "Courses Added"),
                                _summary_tile(credits_text, "Total Credits"),
                                _summary_tile(current_text, "Current CGPA"),
                            ]
                        ),
                    ],
                ),
            ),
        ],
    )
