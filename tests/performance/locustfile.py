import random
import uuid
from locust import HttpUser, task, between

DEPARTMENTS = ["Engineering", "Sales", "Marketing", "Finance", "Human Resources", "Operations"]

class DirectoryUser(HttpUser):
    # Wait time between tasks (simulates user think time)
    wait_time = between(1, 3)

    @task(5)
    def fetch_all_employees(self):
        # What the table client does on load: one page with everything
        self.client.get("/api/v1/employees?page[size]=1000", name="/api/v1/employees [full]")

    @task(2)
    def page_through_employees(self):
        number = random.randint(1, 4)
        self.client.get(
            f"/api/v1/employees?page[size]=10&page[number]={number}&sort=-age",
            name="/api/v1/employees [paged]",
        )

    @task(1)
    def list_departments(self):
        self.client.get("/api/v1/departments")

    @task(1)
    def add_employee(self):
        payload = {
            "first_name": f"Load-{uuid.uuid4().hex[:8]}",
            "last_name": "Tester",
            "age": random.randint(20, 65),
            "position": "Analyst",
            "department_id": random.choice(DEPARTMENTS),
        }
        self.client.post("/api/v1/addEmployees", json=payload)
