from playwright.sync_api import sync_playwright, expect

def verify_app(page):
    print("Navigating to app...")
    page.goto("http://localhost:8501")

    # Wait for the header, which means the app has initialized.
    print("Waiting for app to load...")
    expect(page.get_by_role("heading", name="DecoraPuertas")).to_be_visible(timeout=20000)

    # The default 36 x 74 in door at RD$99/ft2 quotes RD$1,832.
    print("Checking default quote...")
    expect(page.get_by_text("Área estimada")).to_be_visible()
    expect(page.get_by_text("1,832").first).to_be_visible()

    print("Changing quantity to 2...")
    quantity = page.get_by_label("Cantidad")
    quantity.fill("2")
    quantity.press("Enter")
    expect(page.get_by_text("3,663").first).to_be_visible(timeout=10000)

    print("Selecting sample 2...")
    page.get_by_role("button", name="Muestra 2").click()

    print("Taking screenshot...")
    page.screenshot(path="verification/app_verification.png", full_page=True)
    print("Screenshot saved.")

if __name__ == "__main__":
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()
        try:
            verify_app(page)
        except Exception as e:
            print(f"Error: {e}")
            page.screenshot(path="verification/error_screenshot.png")
        finally:
            browser.close()
