"""
Integration tests for the application factory.
"""
from clubhouse.registry import ClubRegistry


class TestCreateApp:

    def test_testing_config(self, app):
        assert app.config['TESTING'] is True
        assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'

    def test_registry_attached(self, app):
        assert isinstance(app.registry, ClubRegistry)

    def test_no_crud_routes(self, client):
        response = client.get('/api/v1/clubs')
        assert response.status_code == 404
