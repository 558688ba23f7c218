from decimal import Decimal

from foodstore import create_app
from foodstore.extensions import db
from foodstore.models.food import Food

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    def add_food(name, description, price):
        if not Food.query.filter_by(name=name).first():
            db.session.add(Food(name=name, description=description, price=Decimal(price)))

    add_food("Nasi Uduk",
             "Betawi style steamed rice cooked in coconut milk. Delicious!",
             "10000.00")
    add_food("Kerak Telor",
             "Betawi traditional spicy omelette made from glutinous rice cooked with egg and served with serundeng.",
             "8000.00")
    add_food("Nasi Semur Jengkol",
             "Based on dongfruit, this menu promises a unique and delicious taste with a small hint of bitterness.",
             "8000.00")
    add_food("Soto Betawi",
             "Beef and offal soup in a rich coconut milk and cow milk broth.",
             "15000.00")
    add_food("Asinan Betawi",
             "Pickled vegetables served with peanut sauce and crackers.",
             "7000.00")

    db.session.commit()

    print("✅ Seed completed.")
