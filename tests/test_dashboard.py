from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from course_manager.extensions import db
from course_manager.models import Course
from conftest import course_form


def create_course_row(app, **values):
    values.setdefault('start_datetime', datetime(2024, 1, 10, 9, 0))
    values.setdefault('end_datetime', datetime(2024, 1, 10, 10, 0))
    with app.app_context():
        course = Course(**values)
        db.session.add(course)
        db.session.commit()
        return course.id


def test_unauthenticated_redirects(client):
    r = client.get('/dashboard')
    assert r.status_code in (301, 302)
    assert '/login' in r.headers['Location']


def test_unauthenticated_post_does_not_mutate(app, client):
    r = client.post('/dashboard', data=course_form())
    assert r.status_code == 302
    assert '/login' in r.headers['Location']
    with app.app_context():
        assert Course.query.count() == 0


def test_create_course_end_to_end(app, auth_client):
    r = auth_client.post('/dashboard', data=course_form())
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/dashboard')

    with app.app_context():
        courses = Course.query.all()
        assert len(courses) == 1
        assert str(courses[0].start_datetime) == '2024-01-10 09:00:00'
        assert str(courses[0].end_datetime) == '2024-01-10 10:00:00'
        assert courses[0].status == 'active'

    r = auth_client.get('/dashboard?sort=a_z')
    assert r.status_code == 200
    assert 'Algebra' in r.get_data(as_text=True)


def test_flash_message_is_read_once(auth_client):
    auth_client.post('/dashboard', data=course_form())

    first = auth_client.get('/dashboard').get_data(as_text=True)
    assert 'Course created successfully.' in first

    second = auth_client.get('/dashboard').get_data(as_text=True)
    assert 'Course created successfully.' not in second


@pytest.mark.parametrize('field', ['name', 'start_date', 'start_time', 'end_date', 'end_time'])
def test_create_requires_all_fields(app, auth_client, field):
    r = auth_client.post('/dashboard', data=course_form(**{field: ''}))
    assert r.status_code == 302
    assert 'All fields are required.' in auth_client.get('/dashboard').get_data(as_text=True)
    with app.app_context():
        assert Course.query.count() == 0


def test_create_rejects_malformed_date(app, auth_client):
    auth_client.post('/dashboard', data=course_form(start_date='2024-13-45'))
    assert 'Invalid date or time.' in auth_client.get('/dashboard').get_data(as_text=True)
    with app.app_context():
        assert Course.query.count() == 0


def test_create_rejects_unknown_status(app, auth_client):
    auth_client.post('/dashboard', data=course_form(status='archived'))
    assert 'Invalid course status.' in auth_client.get('/dashboard').get_data(as_text=True)
    with app.app_context():
        assert Course.query.count() == 0


def test_update_course(app, auth_client):
    course_id = create_course_row(app, name='Algebra')
    auth_client.post('/dashboard', data=course_form(
        action='update', id=str(course_id), name='Geometry', start_time='11:30', status='inactive'))

    assert 'Course updated successfully.' in auth_client.get('/dashboard').get_data(as_text=True)
    with app.app_context():
        course = db.session.get(Course, course_id)
        assert course.name == 'Geometry'
        assert course.start_datetime == datetime(2024, 1, 10, 11, 30)
        assert course.status == 'inactive'


@pytest.mark.parametrize('bad_id', ['', '0', '-3', 'abc'])
def test_update_requires_valid_id(app, auth_client, bad_id):
    auth_client.post('/dashboard', data=course_form(action='update', id=bad_id))
    assert 'Invalid course ID for update.' in auth_client.get('/dashboard').get_data(as_text=True)
    with app.app_context():
        assert Course.query.count() == 0


def test_update_missing_course_reports_failure(app, auth_client):
    auth_client.post('/dashboard', data=course_form(action='update', id='999'))
    assert 'Failed to update course.' in auth_client.get('/dashboard').get_data(as_text=True)
    with app.app_context():
        assert Course.query.count() == 0


def test_delete_twice(app, auth_client):
    course_id = create_course_row(app, name='Algebra')

    auth_client.post('/dashboard', data={'action': 'delete', 'id': str(course_id)})
    assert 'Course deleted successfully.' in auth_client.get('/dashboard').get_data(as_text=True)

    r = auth_client.post('/dashboard', data={'action': 'delete', 'id': str(course_id)})
    assert r.status_code == 302
    assert 'Failed to delete course.' in auth_client.get('/dashboard').get_data(as_text=True)

    with app.app_context():
        assert db.session.get(Course, course_id) is None


def test_delete_requires_valid_id(auth_client):
    r = auth_client.post('/dashboard', data={'action': 'delete', 'id': 'x'})
    assert r.status_code == 302
    assert 'Invalid course ID for deletion.' in auth_client.get('/dashboard').get_data(as_text=True)


@pytest.mark.parametrize('action, message', [
    ('delete', 'Invalid course ID for deletion.'),
    ('update', 'Invalid course ID for update.'),
])
def test_out_of_range_id_redirects(app, auth_client, action, message):
    r = auth_client.post('/dashboard', data=course_form(action=action, id='99999999999999999999'))
    assert r.status_code == 302
    assert message in auth_client.get('/dashboard').get_data(as_text=True)
    with app.app_context():
        assert Course.query.count() == 0


def test_unknown_action_redirects(auth_client):
    r = auth_client.post('/dashboard', data={'action': 'archive'})
    assert r.status_code == 302
    assert 'Unknown action.' in auth_client.get('/dashboard').get_data(as_text=True)


def test_listing_filters_by_status(app, auth_client):
    create_course_row(app, name='Algebra', status='active')
    create_course_row(app, name='Biology', status='inactive')

    body = auth_client.get('/dashboard?status=inactive').get_data(as_text=True)
    assert 'Biology' in body
    assert 'Algebra' not in body
    assert 'Showing 1 of 2 courses' in body


def test_listing_sorts_by_name(app, auth_client):
    for name in ('Biology', 'Algebra', 'Chemistry'):
        create_course_row(app, name=name)

    body = auth_client.get('/dashboard?sort=z_a').get_data(as_text=True)
    assert body.index('Chemistry') < body.index('Biology') < body.index('Algebra')


def test_edit_prefill_splits_timestamps(app, auth_client):
    course_id = create_course_row(app, name='Algebra',
                                  start_datetime=datetime(2024, 2, 1, 14, 30),
                                  end_datetime=datetime(2024, 2, 1, 16, 0))

    body = auth_client.get(f'/dashboard?edit_id={course_id}').get_data(as_text=True)
    assert 'Edit Course' in body
    assert 'value="update"' in body
    assert 'value="2024-02-01"' in body
    assert 'value="14:30"' in body
    assert 'value="16:00"' in body


@pytest.mark.parametrize('edit_id', ['999', '0', '-1', 'abc', '99999999999999999999'])
def test_edit_prefill_with_unknown_id(auth_client, edit_id):
    r = auth_client.get(f'/dashboard?edit_id={edit_id}')
    assert r.status_code == 200
    assert 'Add New Course' in r.get_data(as_text=True)


def test_dashboard_index_alias(auth_client):
    assert auth_client.get('/dashboard/index').status_code == 200


def test_database_failure_renders_error_page(auth_client, monkeypatch):
    def broken_listing(sort, status):
        raise OperationalError('SELECT 1', {}, Exception('unable to open database file'))

    monkeypatch.setattr('course_manager.dashboard.routes.get_listing', broken_listing)
    r = auth_client.get('/dashboard')
    assert r.status_code == 500
    body = r.get_data(as_text=True)
    assert 'Database Error' in body
    assert 'unable to open database file' not in body
