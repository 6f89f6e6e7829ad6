from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from models.insurance_revenue import InsuranceRevenue
from models.investment_revenue import InvestmentRevenue
from models.goal import Goal, DatabaseGoalStore
