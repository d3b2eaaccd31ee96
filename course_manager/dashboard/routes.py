"""
Dashboard Routes

Course management for authenticated users.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from course_manager.dashboard import dashboard_bp
from course_manager.dashboard.forms import CourseFormError, parse_course_action
from course_manager.dashboard.services import get_listing, build_edit_course, apply_course_action
from course_manager.services import SORT_OPTIONS, count_courses
from course_manager.models import COURSE_STATUSES


@dashboard_bp.route('/dashboard/index', methods=['GET', 'POST'])
@dashboard_bp.route('/dashboard', methods=['GET', 'POST'])
@login_required
def index():
    """Course listing (GET) and create/update/delete (POST)"""
    if request.method == 'POST':
        try:
            action = parse_course_action(request.form)
        except CourseFormError as e:
            flash(e.message, 'error')
        else:
            category, message = apply_course_action(action)
            flash(message, category)

        # Post/Redirect/Get so a refresh does not resubmit
        return redirect(url_for('dashboard.index'))

    courses, sort, status = get_listing(request.args.get('sort'), request.args.get('status'))
    edit_course = build_edit_course(request.args.get('edit_id'))

    return render_template('dashboard/dashboard.html',
                           courses=courses,
                           total_courses=count_courses(),
                           sort=sort,
                           status=status,
                           edit_course=edit_course,
                           sort_options=SORT_OPTIONS,
                           statuses=COURSE_STATUSES,
                           user_email=current_user.email)
